"""
Tests for animal construction, habitat grouping and report rendering.
"""

import pytest

from src.zookeeper.animal_factory import AnimalFactory
from src.zookeeper.errors import UnsupportedSpeciesError
from src.zookeeper.id_allocator import IdAllocator
from src.zookeeper.models import HABITAT_ORDER, ArrivalRow, Species
from src.zookeeper.name_pool import NamePool
from src.zookeeper.report import HabitatIndex, ReportRenderer


def _row(species: str = "hyena", **overrides) -> ArrivalRow:
    values = dict(
        arrival_date="2024-03-05",
        age=3,
        sex="female",
        species=species,
        birth_season="spring",
        color="tan",
        weight=70,
        origin="Friguia Park, Tunisia",
    )
    values.update(overrides)
    return ArrivalRow(**values)


def _factory(names=None) -> AnimalFactory:
    return AnimalFactory(NamePool(names or {}), IdAllocator())


def test_create_animal_derives_fields():
    factory = _factory({"hyena": ["Kamari", "Simba"]})
    animal = factory.create_animal(_row())

    assert animal.unique_id == "Hy01"
    assert animal.name == "Kamari"
    assert animal.species is Species.HYENA
    assert animal.birth_date == "2021-03-15"
    assert animal.habitat_name == "Hyena Habitat"
    assert animal.social_group_label == "Clan: Motto Clan"
    assert animal.report_line() == (
        "Hy01; Kamari; birth date 2021-03-15; tan color; female; 70 pounds; "
        "from Friguia Park, Tunisia; arrived 2024-03-05"
    )


def test_second_animal_of_species_rotates_group_and_id():
    factory = _factory({"bear": ["Yogi"]})
    first = factory.create_animal(_row("bear"))
    second = factory.create_animal(_row("bear"))

    assert (first.unique_id, second.unique_id) == ("Be01", "Be02")
    assert (first.name, second.name) == ("Yogi", "Unnamed bear")
    assert second.social_group_label == "Sleuth: Forest Sleuth"


def test_role_words_per_species():
    factory = _factory()
    labels = {
        species: factory.create_animal(_row(species)).social_group_label
        for species in ["hyena", "lion", "tiger", "bear"]
    }
    assert labels == {
        "hyena": "Clan: Motto Clan",
        "lion": "Pride: Golden Pride",
        "tiger": "Ambush: Ember Ambush",
        "bear": "Sleuth: Highland Sleuth",
    }


def test_unsupported_species_does_not_consume_names():
    factory = _factory({"zebra": ["Marty"]})
    with pytest.raises(UnsupportedSpeciesError):
        factory.create_animal(_row("zebra"))
    assert factory.name_pool.remaining("zebra") == ["Marty"]


def test_unsupported_species_allocates_nothing():
    factory = _factory()
    with pytest.raises(UnsupportedSpeciesError, match="Unsupported species: zebra"):
        factory.create_animal(_row("zebra"))
    assert factory.allocator.counters == {}
    assert factory.allocator.species_counts == {}


def test_species_classified_before_allocation():
    factory = _factory({"lion": ["Leo"]})
    animal = factory.create_animal(_row("Lion"))

    assert animal.species is Species.LION
    assert (animal.unique_id, animal.name) == ("Li01", "Leo")
    assert animal.social_group_label == "Pride: Golden Pride"


def test_to_record():
    animal = _factory({"lion": ["Leo"]}).create_animal(_row("lion"))
    record = animal.to_record()
    assert record["habitat"] == "Lion Habitat"
    assert record["unique_id"] == "Li01"
    assert record["species"] == "lion"
    assert record["social_group"] == "Golden Pride"


def test_habitat_order():
    assert HABITAT_ORDER == ["Hyena Habitat", "Lion Habitat", "Tiger Habitat", "Bear Habitat"]


def test_render_groups_in_fixed_order_with_empty_habitats():
    factory = _factory({"hyena": ["Kamari"], "tiger": ["Rajah"]})
    index = HabitatIndex()
    index.add(factory.create_animal(_row("tiger", color="orange", weight=300)))
    index.add(factory.create_animal(_row("hyena")))

    text = ReportRenderer().render(index)

    assert text == (
        "Hyena Habitat (1)\n"
        "  - Hy01; Kamari; birth date 2021-03-15; tan color; female; 70 pounds; "
        "from Friguia Park, Tunisia; arrived 2024-03-05 | Clan: Motto Clan\n"
        "\n"
        "Lion Habitat (0)\n"
        "\n"
        "Tiger Habitat (1)\n"
        "  - Ti01; Rajah; birth date 2021-03-15; orange color; female; 300 pounds; "
        "from Friguia Park, Tunisia; arrived 2024-03-05 | Ambush: Ember Ambush\n"
        "\n"
        "Bear Habitat (0)\n"
        "\n"
    )


def test_habitat_index_preserves_insertion_order():
    factory = _factory({"lion": ["A", "B", "C"]})
    index = HabitatIndex()
    for _ in range(3):
        index.add(factory.create_animal(_row("lion")))

    assert [a.name for a in index.get("Lion Habitat")] == ["A", "B", "C"]
    assert index.count("Lion Habitat") == 3
    assert index.count("Bear Habitat") == 0
    assert len(index) == 3
