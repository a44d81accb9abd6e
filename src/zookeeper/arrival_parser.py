"""
Parse lines of the arrivals file into ArrivalRow records.

Each line is a fixed, comma-separated sentence:

    2024-03-05, 3 years old female hyena, born in spring, tan color, 70 pounds, from Friguia Park, Tunisia

Segments are positional. Alternate phrasings or orderings are not supported.
"""

import re
from pathlib import Path
from typing import Iterator, List, Tuple, Union

from .errors import FormatError, NumericParseError
from .models import ArrivalRow
from .text_utils import split, to_lower, trim

SEGMENT_DELIMITER = ", "
MIN_SEGMENTS = 6

_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def parse_arrival_row(line: str) -> ArrivalRow:
    """
    Break one arrival sentence into its facts.

    Raises:
        FormatError: If the line has fewer than six segments or the
            age/sex/species segment is incomplete
        NumericParseError: If the weight is not a number
    """
    parts = split(line, SEGMENT_DELIMITER)
    if len(parts) < MIN_SEGMENTS:
        raise FormatError(f"Malformed arrival entry: {line}")

    age, sex, species = _parse_age_sex_species(parts[1])

    return ArrivalRow(
        arrival_date=trim(parts[0]),
        age=age,
        sex=sex,
        species=species,
        birth_season=_parse_season(parts[2]),
        color=_parse_color(parts[3]),
        weight=_parse_weight(parts[4]),
        origin=_parse_origin(parts[5:]),
    )


def _parse_age_sex_species(segment: str) -> Tuple[int, str, str]:
    """Read '<age> year(s) old <sex> <species>'."""
    match = re.match(r"\s*(\d+)(.*)", segment, re.DOTALL | re.ASCII)
    tokens = match.group(2).split() if match else []
    if len(tokens) < 4:
        raise FormatError(f"Unable to parse age/sex/species segment: {segment}")

    # tokens[0] is "year"/"years", tokens[1] is "old"
    return int(match.group(1)), to_lower(tokens[2]), to_lower(tokens[3])


def _parse_season(segment: str) -> str:
    """Season after 'born in', or the whole segment; 'unknown' if empty."""
    lowered = to_lower(segment)
    marker = lowered.find("born in")
    if marker != -1:
        following = lowered[marker + len("born in"):].split()
        season = following[0] if following else ""
    else:
        season = trim(segment)
    return season or "unknown"


def _parse_color(segment: str) -> str:
    """Text before ' color', or the whole segment."""
    color_pos = to_lower(segment).find(" color")
    if color_pos != -1:
        return trim(segment[:color_pos])
    return trim(segment)


def _parse_weight(segment: str) -> int:
    """Leading integer of '<weight> pounds'."""
    token = segment.split(" ", 1)[0]
    match = _LEADING_INT.match(token)
    if match is None:
        raise NumericParseError(f"Invalid weight: {segment}")
    return int(match.group(1))


def _parse_origin(segments: List[str]) -> str:
    """Rejoin the trailing segments and drop a leading 'from '."""
    origin = SEGMENT_DELIMITER.join(segments)
    if to_lower(origin).startswith("from "):
        origin = origin[len("from "):]
    return trim(origin)


def iter_arrival_lines(path: Union[str, Path]) -> Iterator[Tuple[int, str]]:
    """
    Yield (line_number, line) for each non-blank line, trimmed.

    Raises:
        FileNotFoundError: If the arrivals file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Unable to open arrivals file: {path}")

    with open(path, "r", encoding="utf-8") as f:
        for line_number, raw_line in enumerate(f, start=1):
            line = trim(raw_line)
            if line:
                yield line_number, line
