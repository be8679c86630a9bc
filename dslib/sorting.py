"""Ordering of territorial units by name or by population."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Protocol


class Gender(Enum):
    """Which part of the population a count refers to."""

    MALE = auto()
    FEMALE = auto()
    TOTAL = auto()


class Territory(Protocol):
    """What the sorting and filtering helpers expect of a territorial unit."""

    name: str
    type: Any

    def population(self, year: int, gender: Gender = Gender.TOTAL) -> int:
        """Number of residents in ``year``."""

    def format(self, year: int) -> str:
        """Text describing the unit for one year."""

    def format_all_years(self) -> str:
        """Text describing the unit for every year it has data for."""


ALPHABET_ORDER = (
    "AÁÄBCČDĎEÉFGHIÍJKLĽMNŇOÓÔÖPQRŔSŠTŤUÚÜVWXYÝZŽ"
    "aáäbcčdďeéfghiíjklľmnňoóôöpqrŕsšßtťuúüvwxyýzž"
)
"""Collation order of letters; characters not listed sort after all of these."""

INVALID_CHAR = 1000

_CHAR_ORDER = {ch: order for order, ch in enumerate(ALPHABET_ORDER)}


class TerritorySorter:
    """Comparisons and sort keys for territorial units."""

    def __init__(self, year: int = 2020, gender: Gender = Gender.TOTAL) -> None:
        self.year = year
        self.gender = gender

    @staticmethod
    def char_order(ch: str) -> int:
        """Position of ``ch`` in the collation order, or INVALID_CHAR."""
        return _CHAR_ORDER.get(ch, INVALID_CHAR)

    def set_population_sort_criteria(self, year: int, gender: Gender) -> None:
        """Choose the year and population group used by population ordering."""
        self.year = year
        self.gender = gender

    def alphabetical_key(self, item: Territory) -> tuple[int, ...]:
        """Sort key that orders names letter by letter, shorter name first on a tie."""
        return tuple(self.char_order(ch) for ch in item.name)

    def population_key(self, item: Territory) -> int:
        """Sort key by population for the chosen year and group."""
        return item.population(self.year, self.gender)

    def compare_alphabetical(self, a: Territory, b: Territory) -> bool:
        """Whether ``a`` comes strictly before ``b`` by name."""
        return self.alphabetical_key(a) < self.alphabetical_key(b)

    def compare_population(self, a: Territory, b: Territory) -> bool:
        """Whether ``a`` has strictly fewer residents than ``b``."""
        return self.population_key(a) < self.population_key(b)