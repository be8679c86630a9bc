"""Filtering, sorting and printing of territorial units."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, TextIO

from dslib.sorting import Gender, Territory, TerritorySorter

Predicate = Callable[[Territory], bool]


def contains_str(text: str) -> Predicate:
    """Predicate: the unit's name contains ``text``."""
    return lambda item: text in item.name


def max_residents(year: int, limit: int) -> Predicate:
    """Predicate: at most ``limit`` residents in ``year``."""
    return lambda item: item.population(year) <= limit


def min_residents(year: int, limit: int) -> Predicate:
    """Predicate: at least ``limit`` residents in ``year``."""
    return lambda item: item.population(year) >= limit


def has_type(typ: Any) -> Predicate:
    """Predicate: the unit is of type ``typ``."""
    return lambda item: item.type == typ


def filter_items(items: Iterable[Territory], predicate: Predicate) -> list[Territory]:
    """Items satisfying ``predicate``, in their original order."""
    return [item for item in items if predicate(item)]


def filter_with_contains_str(items: Iterable[Territory], text: str) -> list[Territory]:
    return filter_items(items, contains_str(text))


def filter_with_max_residents(
    items: Iterable[Territory], year: int, limit: int
) -> list[Territory]:
    return filter_items(items, max_residents(year, limit))


def filter_with_min_residents(
    items: Iterable[Territory], year: int, limit: int
) -> list[Territory]:
    return filter_items(items, min_residents(year, limit))


def print_items(
    items: Iterable[Optional[Territory]], year: Optional[int], out: TextIO
) -> None:
    """Write every present item for ``year``, or for all years when ``year`` is None."""
    for item in items:
        if item is None:
            continue
        text = item.format_all_years() if year is None else item.format(year)
        out.write(text + "\n")


_POPULATION_SORTS = {
    "M": Gender.MALE,
    "m": Gender.MALE,
    "Z": Gender.FEMALE,
    "z": Gender.FEMALE,
    "P": Gender.TOTAL,
    "p": Gender.TOTAL,
}


def sort_items(
    items: Iterable[Territory], sorter: TerritorySorter, year: int, sort_type: str
) -> list[Territory]:
    """Sort by name ("A") or by male ("M"), female ("Z") or total ("P") population.

    Any other ``sort_type`` leaves the order unchanged.
    """
    result = list(items)
    if sort_type == "A":
        result.sort(key=sorter.alphabetical_key)
    elif sort_type in _POPULATION_SORTS:
        sorter.set_population_sort_criteria(year, _POPULATION_SORTS[sort_type])
        result.sort(key=sorter.population_key)
    return result


def filter_sort_and_print(
    items: Iterable[Territory],
    sorter: TerritorySorter,
    year: int,
    sort_type: str,
    out: TextIO,
) -> None:
    """Sort the already filtered ``items`` and write each one for ``year``."""
    for item in sort_items(items, sorter, year, sort_type):
        out.write(item.format(year) + "\n")