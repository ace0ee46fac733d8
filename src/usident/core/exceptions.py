"""usident exception hierarchy."""

from __future__ import annotations

from typing import Any


class USIdentError(Exception):
    """Base exception for all usident errors."""


class IdentifierError(USIdentError, ValueError):
    """An identifier could not be constructed from the given input."""

    def __init__(self, kind: str, value: Any, message: str) -> None:
        self.kind = kind
        self.value = value
        super().__init__(message)


class IdentifierSyntaxError(IdentifierError):
    """Input does not match the identifier's digit/delimiter pattern."""


class IdentifierRangeError(IdentifierError):
    """Integer input lies outside the range the identifier can represent."""

    def __init__(self, kind: str, value: int, minimum: int, maximum: int) -> None:
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(kind, value, f"{kind} {value} is out of range [{minimum}, {maximum}].")


class InvalidIdentifierError(IdentifierError):
    """Input is well formed but violates a rule of the identifier."""


class UnknownCategoryError(InvalidIdentifierError):
    """The leading digits of an RTN do not name a known institution category."""

    def __init__(self, value: str, category_id: str) -> None:
        self.category_id = category_id
        super().__init__("RTN", value, f"Unknown category ID: {category_id}")


class ChecksumError(InvalidIdentifierError):
    """The weighted digit sum of an RTN is not a multiple of 10."""

    def __init__(self, value: str, checksum: int) -> None:
        self.checksum = checksum
        super().__init__("RTN", value, f"Routing transit number {value} has invalid checksum.")
