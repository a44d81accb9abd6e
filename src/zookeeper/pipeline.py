"""
Pipeline: Read names and arrivals, build animals, write the population report.

Stages run strictly in order:

    IDLE -> LOADING_NAMES -> STREAMING_ARRIVALS -> RENDERING -> DONE

Any error moves the run to FAILED and aborts it. Bad lines are never
skipped, and the report is only written once every arrival was processed.
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from .animal_factory import AnimalFactory
from .arrival_parser import iter_arrival_lines, parse_arrival_row
from .config import ZooConfig, load_config
from .errors import ZooDataError
from .id_allocator import IdAllocator
from .models import Animal
from .name_pool import NamePool
from .report import HabitatIndex, ReportRenderer

logger = logging.getLogger(__name__)


class PipelineStage(Enum):
    """Where a run currently is."""
    IDLE = "idle"
    LOADING_NAMES = "loading_names"
    STREAMING_ARRIVALS = "streaming_arrivals"
    RENDERING = "rendering"
    DONE = "done"
    FAILED = "failed"


class Pipeline:
    """One zoo population run. Owns all per-run state."""

    def __init__(self, config: Optional[ZooConfig] = None):
        self.config = config or ZooConfig()
        self.stage = PipelineStage.IDLE

        self.name_pool = NamePool()
        self.allocator = IdAllocator()
        self.factory = AnimalFactory(self.name_pool, self.allocator)
        self.renderer = ReportRenderer()

        self.animals: List[Animal] = []
        self.habitat_index = HabitatIndex()

    def _enter(self, stage: PipelineStage) -> None:
        logger.debug("Pipeline stage: %s -> %s", self.stage.value, stage.value)
        self.stage = stage

    def run(self) -> Path:
        """
        Execute the full run and write the report.

        Returns:
            Path of the written report

        Raises:
            OSError: If an input file is missing or unreadable, or output
                cannot be written
            ZooDataError: On the first malformed or unsupported arrival
        """
        try:
            self.load_names()
            self.process_arrivals()
            report_path = self.write_report()
            if self.config.records_path is not None:
                self.export_records(self.config.records_path)
        except Exception:
            self._enter(PipelineStage.FAILED)
            raise

        self._enter(PipelineStage.DONE)
        return report_path

    def load_names(self) -> None:
        self._enter(PipelineStage.LOADING_NAMES)
        loaded = NamePool.from_file(self.config.names_path)
        self.name_pool.names = loaded.names

    def process_arrivals(self) -> None:
        """Parse, enrich, classify and index every arrival line."""
        self._enter(PipelineStage.STREAMING_ARRIVALS)
        arrivals_path = self.config.arrivals_path

        for line_number, line in iter_arrival_lines(arrivals_path):
            try:
                row = parse_arrival_row(line)
                animal = self.factory.create_animal(row)
            except ZooDataError as e:
                raise type(e)(f"{arrivals_path.name}:{line_number}: {e}") from e

            self.animals.append(animal)
            self.habitat_index.add(animal)

        logger.info("Processed %d arrivals from %s", len(self.animals), arrivals_path)

    def render_report(self) -> str:
        self._enter(PipelineStage.RENDERING)
        return self.renderer.render(self.habitat_index)

    def write_report(self) -> Path:
        """Render and write the report, overwriting any previous one."""
        text = self.render_report()

        report_path = self.config.report_path
        report_path.parent.mkdir(parents=True, exist_ok=True)
        with open(report_path, "w", encoding="utf-8") as f:
            f.write(text)

        logger.info("Wrote report for %d animals to %s", len(self.animals), report_path)
        return report_path

    def build_population_records(self) -> List[Dict[str, Any]]:
        """Build one flat record per animal, in report order."""
        records = []
        for habitat in self.renderer.habitat_order:
            for animal in self.habitat_index.get(habitat):
                records.append(animal.to_record())
        return records

    def export_records(self, output_path: Path) -> Path:
        """Export population records with pandas (.parquet or CSV)."""
        import pandas as pd

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        df = pd.DataFrame(
            self.build_population_records(),
            columns=[
                "habitat", "unique_id", "name", "species", "age", "sex", "color",
                "weight", "birth_date", "origin", "arrival_date", "social_group",
            ],
        )
        if output_path.suffix == ".parquet":
            df.to_parquet(output_path, index=False)
        else:
            df.to_csv(output_path, index=False)

        logger.info("Wrote %d records to %s", len(df), output_path)
        return output_path

    def get_stats(self) -> Dict[str, Any]:
        """Animal counts per habitat, in report order."""
        return {
            "total_animals": len(self.animals),
            "habitat_counts": {
                habitat: self.habitat_index.count(habitat)
                for habitat in self.renderer.habitat_order
            },
            "names_remaining": self.name_pool.total_remaining(),
        }


def run_pipeline(config: Optional[ZooConfig] = None) -> Dict[str, Any]:
    """Convenience function to run the full pipeline."""
    pipeline = Pipeline(config)
    pipeline.run()
    return pipeline.get_stats()


def _parse_args(argv: Optional[List[str]] = None):
    import argparse

    parser = argparse.ArgumentParser(
        description="Build the zoo population report from the arrivals list"
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="YAML file with names_path/arrivals_path/report_path/records_path",
    )
    parser.add_argument(
        "--names",
        type=Path,
        default=None,
        help="Name pool file (default: data/animalNames.txt)",
    )
    parser.add_argument(
        "--arrivals",
        type=Path,
        default=None,
        help="Arrivals file (default: data/arrivingAnimals.txt)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Report file (default: zooPopulation.txt)",
    )
    parser.add_argument(
        "--records-output",
        type=Path,
        default=None,
        help="Also export records to this .csv or .parquet file",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    try:
        config = load_config(args.config) if args.config else ZooConfig()
        if args.names:
            config.names_path = args.names
        if args.arrivals:
            config.arrivals_path = args.arrivals
        if args.output:
            config.report_path = args.output
        if args.records_output:
            config.records_path = args.records_output

        pipeline = Pipeline(config)
        report_path = pipeline.run()
    except Exception as e:
        logger.debug("Run failed", exc_info=True)
        print(f"Fatal error: {e}", file=sys.stderr)
        return 1

    print(f"Zoo population report written to {report_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
