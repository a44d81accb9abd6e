"""
Unique IDs and social-group rotation.

IDs look like Hy01, Li03: a two-letter species prefix followed by a
per-species sequence number that starts at 1 and is never reused.
"""

from typing import Dict, Optional

from .models import SPECIES_PROFILES, Species, get_profile


def species_prefix(species: str) -> str:
    """
    Two-letter ID prefix for a species, ignoring case.

    Raises:
        UnsupportedSpeciesError: For anything but hyena, lion, tiger or bear
    """
    return SPECIES_PROFILES[Species.from_key(species)].id_prefix


def gen_unique_id(species: str, counters: Dict[str, int]) -> str:
    """Advance the counter for the species' prefix and build the ID."""
    prefix = species_prefix(species)
    counters[prefix] = counters.get(prefix, 0) + 1
    return f"{prefix}{counters[prefix]:02d}"


def select_social_group(species_key: str, index: int) -> str:
    """
    Rotate through the species' group names.

    index is how many animals of this species were created before this one.
    """
    profile = get_profile(species_key)
    if profile is None or not profile.social_groups:
        return "Unknown"
    options = profile.social_groups
    return options[index % len(options)]


class IdAllocator:
    """
    Per-run ID counters (keyed by prefix) and per-species creation counts.
    """

    def __init__(self, counters: Optional[Dict[str, int]] = None):
        self.counters: Dict[str, int] = counters if counters is not None else {}
        self.species_counts: Dict[str, int] = {}

    def next_id(self, species: str) -> str:
        return gen_unique_id(species, self.counters)

    def next_group(self, species_key: str) -> str:
        """Group for the next animal of a species; call record_created() after."""
        return select_social_group(species_key, self.species_counts.get(species_key, 0))

    def record_created(self, species_key: str) -> None:
        self.species_counts[species_key] = self.species_counts.get(species_key, 0) + 1
