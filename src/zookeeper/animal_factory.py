"""
AnimalFactory: Turn parsed arrival rows into Animal records.
"""

import logging

from .dates import gen_birth_day
from .id_allocator import IdAllocator
from .models import Animal, ArrivalRow, Species
from .name_pool import NamePool

logger = logging.getLogger(__name__)


class AnimalFactory:
    """Factory for animal records; owns nothing but references run state."""

    def __init__(self, name_pool: NamePool, allocator: IdAllocator):
        self.name_pool = name_pool
        self.allocator = allocator

    def create_animal(self, row: ArrivalRow) -> Animal:
        """
        Derive ID, name, birth date and social group, then build the record.

        Raises:
            UnsupportedSpeciesError: If the row's species is not housed here
            FormatError: If the arrival date cannot be parsed
        """
        species = Species.from_key(row.species)
        key = species.value
        unique_id = self.allocator.next_id(key)
        name = self.name_pool.next_name(key)
        birth_date = gen_birth_day(row.age, row.birth_season, row.arrival_date)
        group = self.allocator.next_group(key)

        animal = Animal(
            unique_id=unique_id,
            name=name,
            species=species,
            age=row.age,
            sex=row.sex,
            color=row.color,
            weight=row.weight,
            origin=row.origin,
            arrival_date=row.arrival_date,
            birth_date=birth_date,
            social_group=group,
        )
        self.allocator.record_created(key)

        logger.debug("Created %s (%s) for %s", animal.unique_id, animal.name, animal.habitat_name)
        return animal
