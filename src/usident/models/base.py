"""Common behavior of the nine-digit identifier value types.

Subclasses implement ``_parse`` for the textual form and ``__str__`` for the
canonical form; everything else (integer input, equality, ordering, hashing,
immutability and pydantic field support) lives here.
"""

from __future__ import annotations

import logging
from functools import total_ordering
from typing import Any, ClassVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from usident.core.config import get_settings
from usident.core.exceptions import IdentifierError, IdentifierRangeError, IdentifierSyntaxError
from usident.core.logs import redact
from usident.core.types import IdentifierInput

logger = logging.getLogger(__name__)


def _log_rejection(exc: IdentifierError) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    settings = get_settings()
    if not settings.log_rejections:
        return
    shown = redact(exc.value) if settings.redact_input else exc.value
    # The exception message carries the raw input, so only its type is logged.
    logger.debug("Rejected %s %s: %s", exc.kind, shown, type(exc).__name__)


@total_ordering
class NineDigitIdentifier:
    """Immutable identifier backed by a nine-digit decimal value."""

    __slots__ = ("_value",)

    KIND: ClassVar[str] = "identifier"
    LENGTH: ClassVar[int] = 9
    MIN_VALUE: ClassVar[int] = 0
    MAX_VALUE: ClassVar[int] = 999_999_999
    JSON_PATTERN: ClassVar[str] = r"^[0-9]{9}$"

    def __init__(self, value: IdentifierInput) -> None:
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise TypeError(f"{self.KIND} must be an int or str, not {type(value).__name__}.")
        try:
            text = self._pad(value) if isinstance(value, int) else value
            self._parse(text)
        except IdentifierError as exc:
            _log_rejection(exc)
            raise

    @classmethod
    def _pad(cls, value: int) -> str:
        """Zero-pad an integer to the identifier length after a range check."""
        if not cls.MIN_VALUE <= value <= cls.MAX_VALUE:
            raise IdentifierRangeError(cls.KIND, value, cls.MIN_VALUE, cls.MAX_VALUE)
        return f"{value:0{cls.LENGTH}d}"

    def _parse(self, text: str) -> None:
        raise NotImplementedError

    def _set(self, name: str, value: Any) -> None:
        object.__setattr__(self, name, value)

    @classmethod
    def is_valid(cls, value: IdentifierInput) -> bool:
        """Quick check whether ``value`` is an acceptable identifier."""
        try:
            cls(value)
        except IdentifierError:
            return False
        return True

    @property
    def value(self) -> int:
        return self._value

    # ---- value semantics ----

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (str(self),))

    def __eq__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __lt__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self._value < other._value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash(self._value)

    def __int__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    # ---- pydantic field support ----

    @classmethod
    def _coerce(cls, value: Any) -> NineDigitIdentifier:
        if isinstance(value, cls):
            return value
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise IdentifierSyntaxError(
                cls.KIND, value, f"{cls.KIND} must be given as an integer or a string."
            )
        return cls(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(str, when_used="json"),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "pattern": cls.JSON_PATTERN, "title": cls.KIND}
