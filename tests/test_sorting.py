from dataclasses import dataclass, field

import pytest

from dslib.sorting import (
    ALPHABET_ORDER,
    INVALID_CHAR,
    Gender,
    TerritorySorter,
)


@dataclass
class Unit:
    name: str
    counts: dict = field(default_factory=dict)
    type: str = "obec"

    def population(self, year, gender=Gender.TOTAL):
        return self.counts.get((year, gender), 0)

    def format(self, year):
        return f"{self.name} {self.population(year)}"

    def format_all_years(self):
        return self.name


def test_char_order_first_letter():
    assert TerritorySorter.char_order("A") == 0


def test_char_order_unknown_is_invalid():
    assert TerritorySorter.char_order("?") == INVALID_CHAR


def test_char_order_follows_alphabet():
    orders = [TerritorySorter.char_order(ch) for ch in ALPHABET_ORDER]
    assert orders == sorted(orders)
    assert len(set(orders)) == len(ALPHABET_ORDER)


def test_slovak_letters_sort_between_base_letters():
    sorter = TerritorySorter()
    assert sorter.char_order("C") < sorter.char_order("Č") < sorter.char_order("D")


def test_compare_alphabetical_prefix_shorter_first():
    sorter = TerritorySorter()
    short, long = Unit("Nitra"), Unit("Nitrany")
    assert sorter.compare_alphabetical(short, long)
    assert not sorter.compare_alphabetical(long, short)


def test_compare_alphabetical_uses_custom_order():
    sorter = TerritorySorter()
    c_name, ch_name = Unit("Cabaj"), Unit("Čadca")
    assert sorter.compare_alphabetical(c_name, ch_name)
    assert not sorter.compare_alphabetical(ch_name, c_name)


def test_compare_alphabetical_equal_names():
    sorter = TerritorySorter()
    assert not sorter.compare_alphabetical(Unit("Trnava"), Unit("Trnava"))


def test_alphabetical_key_sorts_consistently_with_compare():
    sorter = TerritorySorter()
    units = [Unit("Žilina"), Unit("Bratislava"), Unit("Ábelová"), Unit("Košice")]
    ordered = sorted(units, key=sorter.alphabetical_key)
    for first, second in zip(ordered, ordered[1:]):
        assert not sorter.compare_alphabetical(second, first)
    assert [u.name for u in ordered][0] == "Ábelová"


def test_default_criteria():
    sorter = TerritorySorter()
    assert sorter.year == 2020
    assert sorter.gender is Gender.TOTAL


def test_compare_population_uses_criteria():
    a = Unit("A", {(2021, Gender.MALE): 10, (2021, Gender.FEMALE): 50})
    b = Unit("B", {(2021, Gender.MALE): 20, (2021, Gender.FEMALE): 5})
    sorter = TerritorySorter()
    sorter.set_population_sort_criteria(2021, Gender.MALE)
    assert sorter.compare_population(a, b)
    sorter.set_population_sort_criteria(2021, Gender.FEMALE)
    assert sorter.compare_population(b, a)
    assert not sorter.compare_population(a, b)


def test_population_key_reads_selected_value():
    unit = Unit("A", {(2022, Gender.TOTAL): 123})
    sorter = TerritorySorter()
    sorter.set_population_sort_criteria(2022, Gender.TOTAL)
    assert sorter.population_key(unit) == 123


@pytest.mark.parametrize("gender", list(Gender))
def test_population_sort_matches_compare(gender):
    units = [Unit(str(i), {(2020, gender): v}) for i, v in enumerate([5, 1, 9, 3])]
    sorter = TerritorySorter(2020, gender)
    ordered = sorted(units, key=sorter.population_key)
    for first, second in zip(ordered, ordered[1:]):
        assert not sorter.compare_population(second, first)