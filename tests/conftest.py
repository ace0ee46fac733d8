"""Shared fixtures."""

from __future__ import annotations

import pytest

from usident.core.config import get_settings
from usident.models.rtn import CHECKSUM_WEIGHTS


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _with_check_digit(first_eight: str) -> str:
    partial = sum(w * int(d) for w, d in zip(CHECKSUM_WEIGHTS[:8], first_eight))
    return first_eight + str(-partial % 10)


@pytest.fixture
def with_check_digit():
    """Append the digit that makes an eight-digit prefix a checksum-valid RTN."""
    return _with_check_digit
