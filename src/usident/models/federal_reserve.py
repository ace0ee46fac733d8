"""Districts of the Federal Reserve banking system in the United States.

Members are declared in increasing order of district number/letter. Routing
transit numbers encode a district as an offset into this order, so the
declaration order must never change.
"""

from __future__ import annotations

from enum import Enum

from usident.core.exceptions import IdentifierRangeError, IdentifierSyntaxError
from usident.core.types import DistrictNumber


class FederalReserveDistrict(Enum):
    """A Federal Reserve district; the value is its display name."""

    BOSTON = "Boston"
    NEW_YORK = "New York"
    PHILADELPHIA = "Philadelphia"
    CLEVELAND = "Cleveland"
    RICHMOND = "Richmond"
    ATLANTA = "Atlanta"
    CHICAGO = "Chicago"
    ST_LOUIS = "St. Louis"
    MINNEAPOLIS = "Minneapolis"
    KANSAS_CITY = "Kansas City"
    DALLAS = "Dallas"
    SAN_FRANCISCO = "San Francisco"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def number(self) -> DistrictNumber:
        """Identifying number of the district, starting with 1 for Boston."""
        return _POSITIONS[self] + 1

    @property
    def letter(self) -> str:
        """Identifying letter of the district, starting with 'A' for Boston."""
        return chr(ord("A") + _POSITIONS[self])

    @classmethod
    def at_offset(cls, offset: int) -> FederalReserveDistrict:
        """Return the district at a 0-based position in declaration order."""
        return _BY_POSITION[offset]

    @classmethod
    def from_number(cls, number: DistrictNumber) -> FederalReserveDistrict:
        if not 1 <= number <= len(_BY_POSITION):
            raise IdentifierRangeError("Federal Reserve district", number, 1, len(_BY_POSITION))
        return _BY_POSITION[number - 1]

    @classmethod
    def from_letter(cls, letter: str) -> FederalReserveDistrict:
        upper = letter.upper()
        offset = ord(upper) - ord("A") if len(upper) == 1 else -1
        if not 0 <= offset < len(_BY_POSITION):
            raise IdentifierSyntaxError(
                "Federal Reserve district",
                letter,
                f"{letter!r} is not a Federal Reserve district letter.",
            )
        return _BY_POSITION[offset]


_BY_POSITION: tuple[FederalReserveDistrict, ...] = tuple(FederalReserveDistrict)
_POSITIONS: dict[FederalReserveDistrict, int] = {
    district: position for position, district in enumerate(_BY_POSITION)
}
