"""Type aliases used across usident."""

from __future__ import annotations

IdentifierInput = int | str
CategoryID = int
DistrictNumber = int
