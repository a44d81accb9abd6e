"""
NamePool: Load candidate animal names and hand them out one at a time.

The name file has one line per species:

    hyena: Kamari, Simba, Nia
    lion: Leo, Nala

Names are consumed front to back and never returned to the pool.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from .errors import FormatError
from .text_utils import split, to_lower, trim

logger = logging.getLogger(__name__)

NameRecord = Dict[str, List[str]]


def load_animal_names(path: Union[str, Path]) -> NameRecord:
    """
    Read a species -> names file.

    A species listed on more than one line keeps only its last list.

    Raises:
        FileNotFoundError: If the file doesn't exist
        FormatError: If a non-blank line has no ':' separator
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Unable to open name file: {path}")

    names: NameRecord = {}
    with open(path, "r", encoding="utf-8") as f:
        for raw_line in f:
            line = trim(raw_line)
            if not line:
                continue

            species, sep, values = line.partition(":")
            if not sep:
                raise FormatError(f"Expected ':' in name line: {line}")

            species = to_lower(trim(species))
            tokens = (trim(token) for token in split(trim(values), ","))
            names[species] = [token for token in tokens if token]

    return names


def pop_next_name(names: NameRecord, species_key: str) -> str:
    """
    Remove and return the next unused name for a species.

    Falls back to "Unnamed {species_key}" once the pool is empty. An unseen
    key is added to the mapping with an empty pool.
    """
    pool = names.setdefault(species_key, [])
    if pool:
        return pool.pop(0)
    return f"Unnamed {species_key}"


class NamePool:
    """
    Consumable per-species name pools for one pipeline run.
    """

    def __init__(self, names: Optional[NameRecord] = None):
        self.names: NameRecord = names if names is not None else {}

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "NamePool":
        """Load pools from a name file."""
        pool = cls(load_animal_names(path))
        logger.info(
            "Loaded %d names for %d species from %s",
            pool.total_remaining(),
            len(pool.names),
            path,
        )
        return pool

    def next_name(self, species_key: str) -> str:
        exhausted = not self.names.get(species_key)
        name = pop_next_name(self.names, species_key)
        if exhausted:
            logger.warning("Name pool exhausted for %s, using '%s'", species_key, name)
        return name

    def remaining(self, species_key: str) -> List[str]:
        """Names not yet handed out for a species."""
        return list(self.names.get(species_key, []))

    def total_remaining(self) -> int:
        return sum(len(pool) for pool in self.names.values())
