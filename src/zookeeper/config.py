"""
Run configuration: where to read names/arrivals and where to write output.
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


DEFAULT_NAMES_PATH = Path("data/animalNames.txt")
DEFAULT_ARRIVALS_PATH = Path("data/arrivingAnimals.txt")
DEFAULT_REPORT_PATH = Path("zooPopulation.txt")


@dataclass
class ZooConfig:
    """Input and output paths for one pipeline run."""
    names_path: Path = DEFAULT_NAMES_PATH
    arrivals_path: Path = DEFAULT_ARRIVALS_PATH
    report_path: Path = DEFAULT_REPORT_PATH

    # Optional tabular export (.csv or .parquet)
    records_path: Optional[Path] = None

    def __post_init__(self):
        self.names_path = Path(self.names_path)
        self.arrivals_path = Path(self.arrivals_path)
        self.report_path = Path(self.report_path)
        if self.records_path is not None:
            self.records_path = Path(self.records_path)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ZooConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**{k: v for k, v in data.items() if v is not None})


def load_config(config_path: Union[str, Path]) -> ZooConfig:
    """
    Load a ZooConfig from YAML.

    Missing keys keep their defaults.

    Raises:
        FileNotFoundError: If config_path doesn't exist
        ValueError: If the file is not a mapping or has unknown keys
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    return ZooConfig.from_dict(data)
