"""Validated, immutable US financial and civil identifiers.

- RTN — ABA routing transit number, with institution category and
  Federal Reserve district
- SSN — social security number, with area/group/serial parts
- FederalReserveDistrict — the twelve Federal Reserve districts
"""

from __future__ import annotations

import logging

from usident.core.config import USIdentSettings, get_settings
from usident.core.exceptions import (
    ChecksumError,
    IdentifierError,
    IdentifierRangeError,
    IdentifierSyntaxError,
    InvalidIdentifierError,
    UnknownCategoryError,
    USIdentError,
)
from usident.core.logs import configure_logging
from usident.models.federal_reserve import FederalReserveDistrict
from usident.models.rtn import RTN, RTNCategory
from usident.models.ssn import SSN

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Identifiers
    "RTN",
    "RTNCategory",
    "SSN",
    "FederalReserveDistrict",
    # Errors
    "USIdentError",
    "IdentifierError",
    "IdentifierSyntaxError",
    "IdentifierRangeError",
    "InvalidIdentifierError",
    "UnknownCategoryError",
    "ChecksumError",
    # Configuration
    "USIdentSettings",
    "get_settings",
    "configure_logging",
]
