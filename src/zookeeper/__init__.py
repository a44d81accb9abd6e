"""
Zoo population report generation.

Reads a name pool and an arrivals list, assigns IDs, names, birth dates and
social groups, and writes a habitat-grouped population report.
"""

from .errors import (
    ZooDataError,
    FormatError,
    NumericParseError,
    UnsupportedSpeciesError,
)
from .models import (
    Animal,
    ArrivalRow,
    Species,
    SpeciesProfile,
    SPECIES_PROFILES,
    HABITAT_ORDER,
)
from .text_utils import trim, to_lower, split
from .dates import IsoDate, parse_iso_date, format_iso_date, gen_birth_day
from .name_pool import NamePool, load_animal_names, pop_next_name
from .id_allocator import IdAllocator, species_prefix, gen_unique_id, select_social_group
from .arrival_parser import parse_arrival_row, iter_arrival_lines
from .animal_factory import AnimalFactory
from .report import HabitatIndex, ReportRenderer
from .config import ZooConfig, load_config
from .pipeline import Pipeline, PipelineStage, run_pipeline

__all__ = [
    # Errors
    "ZooDataError",
    "FormatError",
    "NumericParseError",
    "UnsupportedSpeciesError",
    # Models
    "Animal",
    "ArrivalRow",
    "Species",
    "SpeciesProfile",
    "SPECIES_PROFILES",
    "HABITAT_ORDER",
    # Helpers
    "trim",
    "to_lower",
    "split",
    "IsoDate",
    "parse_iso_date",
    "format_iso_date",
    "gen_birth_day",
    # Allocation
    "NamePool",
    "load_animal_names",
    "pop_next_name",
    "IdAllocator",
    "species_prefix",
    "gen_unique_id",
    "select_social_group",
    # Parsing and building
    "parse_arrival_row",
    "iter_arrival_lines",
    "AnimalFactory",
    # Reporting
    "HabitatIndex",
    "ReportRenderer",
    # Pipeline
    "ZooConfig",
    "load_config",
    "Pipeline",
    "PipelineStage",
    "run_pipeline",
]
