"""
Group animals by habitat and render the population report.

Report layout, one block per habitat in fixed order:

    Hyena Habitat (2)
      - Hy01; Kamari; birth date 2021-03-15; ... | Clan: Motto Clan
      - Hy02; ...

    Lion Habitat (0)

"""

from typing import Dict, Iterable, List, Optional

from .models import HABITAT_ORDER, Animal


class HabitatIndex:
    """Habitat name -> animals, in arrival order."""

    def __init__(self):
        self._by_habitat: Dict[str, List[Animal]] = {}

    def add(self, animal: Animal) -> None:
        self._by_habitat.setdefault(animal.habitat_name, []).append(animal)

    def get(self, habitat_name: str) -> List[Animal]:
        return list(self._by_habitat.get(habitat_name, []))

    def count(self, habitat_name: str) -> int:
        return len(self._by_habitat.get(habitat_name, []))

    def __len__(self) -> int:
        return sum(len(animals) for animals in self._by_habitat.values())


class ReportRenderer:
    """Renders a HabitatIndex to report text."""

    def __init__(self, habitat_order: Optional[Iterable[str]] = None):
        self.habitat_order = list(habitat_order) if habitat_order is not None else list(HABITAT_ORDER)

    def render_lines(self, index: HabitatIndex) -> List[str]:
        lines: List[str] = []
        for habitat in self.habitat_order:
            occupants = index.get(habitat)
            lines.append(f"{habitat} ({len(occupants)})")
            for animal in occupants:
                lines.append(self.render_animal(animal))
            lines.append("")
        return lines

    def render_animal(self, animal: Animal) -> str:
        return f"  - {animal.report_line()} | {animal.social_group_label}"

    def render(self, index: HabitatIndex) -> str:
        """Full report text, newline-terminated."""
        return "".join(f"{line}\n" for line in self.render_lines(index))
