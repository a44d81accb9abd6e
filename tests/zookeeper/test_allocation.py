"""
Tests for ID generation, social-group rotation and name pools.
"""

from pathlib import Path

import pytest

from src.zookeeper.errors import FormatError, UnsupportedSpeciesError
from src.zookeeper.id_allocator import (
    IdAllocator,
    gen_unique_id,
    select_social_group,
    species_prefix,
)
from src.zookeeper.name_pool import NamePool, load_animal_names, pop_next_name


@pytest.mark.parametrize(
    "species, prefix",
    [("hyena", "Hy"), ("LION", "Li"), ("Tiger", "Ti"), ("bEaR", "Be")],
)
def test_species_prefix(species, prefix):
    assert species_prefix(species) == prefix


@pytest.mark.parametrize("species", ["zebra", "", "lions"])
def test_species_prefix_unsupported(species):
    with pytest.raises(UnsupportedSpeciesError):
        species_prefix(species)


def test_gen_unique_id_counts_per_prefix():
    counters = {}
    assert gen_unique_id("hyena", counters) == "Hy01"
    assert gen_unique_id("lion", counters) == "Li01"
    assert gen_unique_id("Hyena", counters) == "Hy02"
    assert counters == {"Hy": 2, "Li": 1}


def test_gen_unique_id_pads_to_two_digits_only():
    counters = {"Be": 99}
    assert gen_unique_id("bear", counters) == "Be100"


def test_gen_unique_id_unsupported_leaves_counters_alone():
    counters = {}
    with pytest.raises(UnsupportedSpeciesError):
        gen_unique_id("zebra", counters)
    assert counters == {}


def test_select_social_group_rotates():
    groups = [select_social_group("lion", i) for i in range(5)]
    assert groups == [
        "Golden Pride",
        "Savanna Pride",
        "Sunset Pride",
        "River Pride",
        "Golden Pride",
    ]


def test_select_social_group_unknown_species():
    assert select_social_group("zebra", 0) == "Unknown"
    assert select_social_group("Lion", 0) == "Unknown"


def test_id_allocator_tracks_group_rotation():
    allocator = IdAllocator()
    assert allocator.next_group("tiger") == "Ember Ambush"
    allocator.record_created("tiger")
    assert allocator.next_group("tiger") == "Jungle Ambush"
    assert allocator.next_id("tiger") == "Ti01"


class TestNamePool:
    @pytest.fixture
    def names_file(self, tmp_path: Path) -> Path:
        path = tmp_path / "animalNames.txt"
        path.write_text(
            "Hyena: Kamari, Simba\n"
            "\n"
            "  lion :Leo, , Nala ,\n"
            "bear:\n"
        )
        return path

    def test_load(self, names_file):
        names = load_animal_names(names_file)
        assert names == {"hyena": ["Kamari", "Simba"], "lion": ["Leo", "Nala"], "bear": []}

    def test_last_line_wins(self, tmp_path):
        path = tmp_path / "names.txt"
        path.write_text("tiger: A, B\ntiger: C\n")
        assert load_animal_names(path) == {"tiger": ["C"]}

    def test_missing_separator(self, tmp_path):
        path = tmp_path / "names.txt"
        path.write_text("hyena Kamari, Simba\n")
        with pytest.raises(FormatError, match="Expected ':'"):
            load_animal_names(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_animal_names(tmp_path / "nope.txt")

    def test_pop_until_exhausted(self):
        names = {"hyena": ["Kamari", "Simba"]}
        assert pop_next_name(names, "hyena") == "Kamari"
        assert pop_next_name(names, "hyena") == "Simba"
        assert pop_next_name(names, "hyena") == "Unnamed hyena"
        assert pop_next_name(names, "hyena") == "Unnamed hyena"

    def test_pop_unseen_key_adds_empty_entry(self):
        names = {}
        assert pop_next_name(names, "bear") == "Unnamed bear"
        assert names == {"bear": []}

    def test_pool_from_file(self, names_file):
        pool = NamePool.from_file(names_file)
        assert pool.total_remaining() == 4
        assert pool.next_name("lion") == "Leo"
        assert pool.remaining("lion") == ["Nala"]
        assert pool.next_name("bear") == "Unnamed bear"
