import io
from dataclasses import dataclass, field

from dslib.filters import (
    contains_str,
    filter_items,
    filter_sort_and_print,
    filter_with_contains_str,
    filter_with_max_residents,
    filter_with_min_residents,
    has_type,
    max_residents,
    min_residents,
    print_items,
    sort_items,
)
from dslib.sorting import Gender, TerritorySorter


@dataclass
class Unit:
    name: str
    counts: dict = field(default_factory=dict)
    type: str = "obec"

    def population(self, year, gender=Gender.TOTAL):
        return self.counts.get((year, gender), 0)

    def format(self, year):
        return f"{self.name}:{self.population(year)}"

    def format_all_years(self):
        return f"{self.name}:all"


def make(name, total, male=0, female=0, typ="obec", year=2020):
    return Unit(
        name,
        {
            (year, Gender.TOTAL): total,
            (year, Gender.MALE): male,
            (year, Gender.FEMALE): female,
        },
        typ,
    )


def sample():
    return [
        make("Žilina", 80, 38, 42, "okres"),
        make("Bratislava", 400, 190, 210, "kraj"),
        make("Banská Bystrica", 75, 36, 39, "okres"),
        make("Čadca", 25, 13, 12, "obec"),
    ]


def test_contains_str_predicate():
    assert contains_str("Bys")(make("Banská Bystrica", 1))
    assert not contains_str("bys")(make("Banská Bystrica", 1))


def test_residents_predicates_are_inclusive():
    unit = make("X", 100)
    assert max_residents(2020, 100)(unit)
    assert min_residents(2020, 100)(unit)
    assert not max_residents(2020, 99)(unit)
    assert not min_residents(2020, 101)(unit)


def test_has_type():
    unit = make("X", 1, typ="kraj")
    assert has_type("kraj")(unit)
    assert not has_type("obec")(unit)


def test_filter_items_keeps_order():
    units = sample()
    result = filter_items(units, has_type("okres"))
    assert result == [units[0], units[2]]


def test_filter_with_contains_str():
    units = sample()
    assert filter_with_contains_str(units, "ca") == [units[2], units[3]]


def test_filter_with_max_and_min_partition():
    units = sample()
    low = filter_with_max_residents(units, 2020, 79)
    high = filter_with_min_residents(units, 2020, 80)
    assert low == [units[2], units[3]]
    assert high == [units[0], units[1]]
    assert len(low) + len(high) == len(units)


def test_filter_empty_input():
    assert filter_with_contains_str([], "a") == []


def test_print_items_for_year_skips_none():
    units = sample()[:2]
    out = io.StringIO()
    print_items([units[0], None, units[1]], 2020, out)
    assert out.getvalue().splitlines() == [units[0].format(2020), units[1].format(2020)]


def test_print_items_all_years():
    units = sample()
    out = io.StringIO()
    print_items(units, None, out)
    assert out.getvalue().splitlines() == [u.format_all_years() for u in units]


def test_sort_alphabetical():
    units = sample()
    result = sort_items(units, TerritorySorter(), 2020, "A")
    assert [u.name for u in result] == ["Banská Bystrica", "Bratislava", "Čadca", "Žilina"]


def test_lowercase_a_does_not_sort():
    units = sample()
    assert sort_items(units, TerritorySorter(), 2020, "a") == units


def test_unknown_sort_type_keeps_order():
    units = sample()
    assert sort_items(units, TerritorySorter(), 2020, "X") == units


def test_sort_by_total_population():
    units = sample()
    for code in ("P", "p"):
        result = sort_items(units, TerritorySorter(), 2020, code)
        totals = [u.population(2020) for u in result]
        assert totals == sorted(totals)


def test_sort_by_male_and_female_sets_criteria():
    units = sample()
    sorter = TerritorySorter()
    males = sort_items(units, sorter, 2020, "m")
    assert sorter.gender is Gender.MALE
    assert [u.population(2020, Gender.MALE) for u in males] == sorted(
        u.population(2020, Gender.MALE) for u in units
    )
    females = sort_items(units, sorter, 2020, "Z")
    assert sorter.gender is Gender.FEMALE
    assert [u.population(2020, Gender.FEMALE) for u in females] == sorted(
        u.population(2020, Gender.FEMALE) for u in units
    )


def test_sort_does_not_modify_input():
    units = sample()
    original = list(units)
    sort_items(units, TerritorySorter(), 2020, "P")
    assert units == original


def test_filter_sort_and_print():
    units = sample()
    filtered = filter_with_min_residents(units, 2020, 70)
    out = io.StringIO()
    filter_sort_and_print(filtered, TerritorySorter(), 2020, "P", out)
    expected = [u.format(2020) for u in sorted(filtered, key=lambda u: u.population(2020))]
    assert out.getvalue().splitlines() == expected