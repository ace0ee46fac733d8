"""United States Social Security Number (SSN).

A SSN is a nine-digit number made of a three-digit area number, a two-digit
group number and a four-digit serial number. It is accepted in the form
"AAAGGSSSS" or "AAA-GG-SSSS"; none of the three parts may be all zeros.
"""

from __future__ import annotations

import re
from typing import ClassVar

from usident.core.exceptions import IdentifierSyntaxError, InvalidIdentifierError
from usident.models.base import NineDigitIdentifier

AREA_NUMBER_LENGTH = 3
GROUP_NUMBER_LENGTH = 2
SERIAL_NUMBER_LENGTH = 4

DELIMITER = "-"

# Either both delimiters are present or neither is (group 2 is back-referenced).
PATTERN = re.compile(r"([0-9]{3})(-?)([0-9]{2})\2([0-9]{4})")


class SSN(NineDigitIdentifier):
    """A validated, immutable social security number.

    Accepts an int in ``[0, 999999999]`` (zero padded to nine digits, so 0
    is rejected by the area number check) or a string in either accepted
    form. Both forms of the same number are equal.
    """

    __slots__ = ("_area_number", "_group_number", "_serial_number")

    KIND: ClassVar[str] = "SSN"
    MIN_VALUE: ClassVar[int] = 0
    JSON_PATTERN: ClassVar[str] = r"^[0-9]{3}(-?)[0-9]{2}\1[0-9]{4}$"

    def _parse(self, text: str) -> None:
        match = PATTERN.fullmatch(text)
        if match is None:
            raise IdentifierSyntaxError(
                self.KIND,
                text,
                f'SSN {text} is not a valid social security number in the form "XXXXXXXXX" or "XXX-XX-XXXX".',
            )

        area, _, group, serial = match.groups()
        if int(area) == 0:
            raise InvalidIdentifierError(self.KIND, text, "SSN area number cannot be 000.")
        if int(group) == 0:
            raise InvalidIdentifierError(self.KIND, text, "SSN group number cannot be 00.")
        if int(serial) == 0:
            raise InvalidIdentifierError(self.KIND, text, "SSN serial number cannot be 0000.")

        self._set("_area_number", int(area))
        self._set("_group_number", int(group))
        self._set("_serial_number", int(serial))
        self._set("_value", int(area + group + serial))

    @property
    def area_number(self) -> int:
        return self._area_number

    @property
    def group_number(self) -> int:
        return self._group_number

    @property
    def serial_number(self) -> int:
        return self._serial_number

    @property
    def area_number_string(self) -> str:
        return f"{self._area_number:0{AREA_NUMBER_LENGTH}d}"

    @property
    def group_number_string(self) -> str:
        return f"{self._group_number:0{GROUP_NUMBER_LENGTH}d}"

    @property
    def serial_number_string(self) -> str:
        return f"{self._serial_number:0{SERIAL_NUMBER_LENGTH}d}"

    def plain(self) -> str:
        """Unformatted form "AAAGGSSSS"."""
        return self.area_number_string + self.group_number_string + self.serial_number_string

    def canonical(self) -> str:
        """Canonical form "AAA-GG-SSSS"."""
        return DELIMITER.join(
            (self.area_number_string, self.group_number_string, self.serial_number_string)
        )

    def __str__(self) -> str:
        return self.canonical()
