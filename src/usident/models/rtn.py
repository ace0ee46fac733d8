"""ABA Routing Transit Number (RTN) identifying US financial institutions.

A RTN is a nine-digit number in the form "XXXXXXXXX". The first two digits are
the category ID, which names the institution category and, for ranged
categories, the Federal Reserve district. The whole number carries a weighted
checksum that must be a multiple of 10.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import ClassVar

from usident.core.exceptions import (
    ChecksumError,
    IdentifierSyntaxError,
    InvalidIdentifierError,
    UnknownCategoryError,
)
from usident.core.types import CategoryID
from usident.models.base import NineDigitIdentifier
from usident.models.federal_reserve import FederalReserveDistrict

CHECKSUM_WEIGHTS: tuple[int, ...] = (3, 7, 1, 3, 7, 1, 3, 7, 1)

# Group 1 is the two-digit category ID.
PATTERN = re.compile(r"([0-9]{2})[0-9]{7}")


def compute_checksum(digits: str) -> int:
    """Weighted digit sum of a nine-digit RTN string; valid RTNs sum to a multiple of 10."""
    return sum(weight * int(digit) for weight, digit in zip(CHECKSUM_WEIGHTS, digits))


class RTNCategory(Enum):
    """Institution category of an RTN, based on its first two digits.

    Each member is ``(base_id, is_ranged)``. A ranged category covers one
    category ID per Federal Reserve district starting at its base; a single
    category covers only its base. The ranges of the members must not
    overlap, since ``resolve`` returns the first match.
    """

    US_GOVERNMENT = (0, False)
    PRIMARY = (1, True)
    THRIFT = (21, True)
    ELECTRONIC = (61, True)
    TRAVELERS_CHEQUE = (80, False)

    def __init__(self, base_id: int, is_ranged: bool) -> None:
        self.base_id = base_id
        self.is_ranged = is_ranged

    def ids(self) -> range:
        """Category IDs covered by this category."""
        width = len(FederalReserveDistrict) if self.is_ranged else 1
        return range(self.base_id, self.base_id + width)

    def covers(self, category_id: CategoryID) -> bool:
        if self.is_ranged:
            return self.base_id <= category_id < self.base_id + len(FederalReserveDistrict)
        return category_id == self.base_id

    @classmethod
    def resolve(cls, category_id: CategoryID) -> RTNCategory | None:
        """Return the category covering ``category_id``, or None if none does."""
        for category in cls:
            if category.covers(category_id):
                return category
        return None


class RTN(NineDigitIdentifier):
    """A validated, immutable routing transit number.

    Accepts an int in ``[1, 999999999]`` (zero padded to nine digits) or a
    string of exactly nine ASCII digits.
    """

    __slots__ = ("_category_id",)

    Category = RTNCategory

    KIND: ClassVar[str] = "RTN"
    MIN_VALUE: ClassVar[int] = 1

    def _parse(self, text: str) -> None:
        match = PATTERN.fullmatch(text)
        if match is None:
            raise IdentifierSyntaxError(
                self.KIND,
                text,
                f'RTN {text} is not a valid routing transit number in the form "XXXXXXXXX".',
            )

        category_id = int(match.group(1))
        if RTNCategory.resolve(category_id) is None:
            raise UnknownCategoryError(text, match.group(1))

        value = int(text)
        if value == 0:
            raise InvalidIdentifierError(self.KIND, text, f"Illegal routing transit number: {text}")

        checksum = compute_checksum(text)
        if checksum % 10 != 0:
            raise ChecksumError(text, checksum)

        self._set("_category_id", category_id)
        self._set("_value", value)

    @property
    def category_id(self) -> CategoryID:
        return self._category_id

    @property
    def category(self) -> RTNCategory:
        category = RTNCategory.resolve(self._category_id)
        assert category is not None, "Stored category ID should always be recognized."
        return category

    @property
    def federal_reserve_district(self) -> FederalReserveDistrict | None:
        """District of the institution, or None for categories without one."""
        category = self.category
        if not category.is_ranged:
            return None
        return FederalReserveDistrict.at_offset(self._category_id - category.base_id)

    def __str__(self) -> str:
        return f"{self._value:0{self.LENGTH}d}"
