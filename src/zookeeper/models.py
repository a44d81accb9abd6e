"""
Data models for the zoo population pipeline.

The four supported species are a closed set, so an Animal carries a Species
tag and looks its habitat and social-group wording up in SPECIES_PROFILES
instead of relying on one subclass per species.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .errors import UnsupportedSpeciesError
from .text_utils import to_lower


class Species(Enum):
    """Species the zoo can house. Values are the lowercase species keys."""
    HYENA = "hyena"
    LION = "lion"
    TIGER = "tiger"
    BEAR = "bear"

    @classmethod
    def from_key(cls, species: str) -> "Species":
        """Look up a species by name, ignoring case."""
        try:
            return cls(to_lower(species))
        except ValueError:
            raise UnsupportedSpeciesError(f"Unsupported species: {species}") from None


@dataclass(frozen=True)
class SpeciesProfile:
    """Fixed per-species wording and group rotation."""
    display_name: str
    id_prefix: str
    role_word: str  # Clan, Pride, Ambush, Sleuth
    social_groups: Tuple[str, ...]

    @property
    def habitat_name(self) -> str:
        return f"{self.display_name} Habitat"


SPECIES_PROFILES: Dict[Species, SpeciesProfile] = {
    Species.HYENA: SpeciesProfile(
        display_name="Hyena",
        id_prefix="Hy",
        role_word="Clan",
        social_groups=("Motto Clan", "Serengeti Clan", "Savannah Clan", "Spotted Clan"),
    ),
    Species.LION: SpeciesProfile(
        display_name="Lion",
        id_prefix="Li",
        role_word="Pride",
        social_groups=("Golden Pride", "Savanna Pride", "Sunset Pride", "River Pride"),
    ),
    Species.TIGER: SpeciesProfile(
        display_name="Tiger",
        id_prefix="Ti",
        role_word="Ambush",
        social_groups=("Ember Ambush", "Jungle Ambush", "River Ambush", "Shadow Ambush"),
    ),
    Species.BEAR: SpeciesProfile(
        display_name="Bear",
        id_prefix="Be",
        role_word="Sleuth",
        social_groups=("Highland Sleuth", "Forest Sleuth", "Mountain Sleuth", "Valley Sleuth"),
    ),
}

# Report order.
HABITAT_ORDER: List[str] = [SPECIES_PROFILES[s].habitat_name for s in Species]


@dataclass(frozen=True)
class ArrivalRow:
    """Raw facts pulled from one line of the arrivals file."""
    arrival_date: str
    age: int
    sex: str
    species: str
    birth_season: str
    color: str
    weight: int
    origin: str


@dataclass(frozen=True)
class Animal:
    """
    An animal's record as it appears in the population report.

    Built once per arrival line and never modified afterwards.
    """
    unique_id: str
    name: str
    species: Species
    age: int
    sex: str
    color: str
    weight: int
    origin: str
    arrival_date: str
    birth_date: str
    social_group: str

    @property
    def profile(self) -> SpeciesProfile:
        return SPECIES_PROFILES[self.species]

    @property
    def habitat_name(self) -> str:
        return self.profile.habitat_name

    @property
    def social_group_label(self) -> str:
        return f"{self.profile.role_word}: {self.social_group}"

    def report_line(self) -> str:
        """Format one line of the population report."""
        return (
            f"{self.unique_id}; {self.name}; birth date {self.birth_date}; "
            f"{self.color} color; {self.sex}; {self.weight} pounds; "
            f"from {self.origin}; arrived {self.arrival_date}"
        )

    def to_record(self) -> Dict[str, Any]:
        """Convert to a flat dictionary for tabular export."""
        return {
            "habitat": self.habitat_name,
            "unique_id": self.unique_id,
            "name": self.name,
            "species": self.species.value,
            "age": self.age,
            "sex": self.sex,
            "color": self.color,
            "weight": self.weight,
            "birth_date": self.birth_date,
            "origin": self.origin,
            "arrival_date": self.arrival_date,
            "social_group": self.social_group,
        }


def get_profile(species_key: str) -> Optional[SpeciesProfile]:
    """Profile for an exact lowercase species key, or None."""
    for species, profile in SPECIES_PROFILES.items():
        if species.value == species_key:
            return profile
    return None
