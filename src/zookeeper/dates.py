"""
ISO calendar date helpers and birth-date inference.

Dates are handled as plain year/month/day triples rather than datetime.date
because inputs are not range-checked: "2024-13-99" parses and formats back
unchanged.
"""

import re
from dataclasses import dataclass
from typing import Dict, Tuple

from .errors import FormatError
from .text_utils import to_lower


# Season -> (month, day) used when estimating a birthday.
SEASON_TO_MONTH_DAY: Dict[str, Tuple[int, int]] = {
    "spring": (3, 15),
    "summer": (6, 15),
    "fall": (9, 15),
    "autumn": (9, 15),
    "winter": (12, 15),
}

_ISO_DATE_PATTERN = re.compile(r"\s*(\d+)-(\d+)-(\d+)", re.ASCII)


@dataclass(frozen=True)
class IsoDate:
    """A calendar date broken into year/month/day numbers."""
    year: int
    month: int
    day: int


def parse_iso_date(value: str) -> IsoDate:
    """
    Parse a date written like 2024-04-02.

    Raises:
        FormatError: If the dashes are missing or a field is not a number
    """
    match = _ISO_DATE_PATTERN.match(value)
    if match is None:
        raise FormatError(f"Invalid ISO date: {value}")
    year, month, day = (int(group) for group in match.groups())
    return IsoDate(year=year, month=month, day=day)


def format_iso_date(date: IsoDate) -> str:
    """Render a date as YYYY-MM-DD, zero-padded."""
    return f"{date.year:04d}-{date.month:02d}-{date.day:02d}"


def gen_birth_day(age: int, season: str, arrival_date: str) -> str:
    """
    Estimate a birthday from age, birth season and arrival date.

    The year is the arrival year minus the age. A known season pins the
    month/day to the middle of that season's first month; anything else
    reuses the arrival month and day.
    """
    arrival = parse_iso_date(arrival_date)
    month_day = SEASON_TO_MONTH_DAY.get(to_lower(season))
    if month_day is None:
        month_day = (arrival.month, arrival.day)

    birth = IsoDate(year=arrival.year - age, month=month_day[0], day=month_day[1])
    return format_iso_date(birth)
