"""Library configuration using pydantic-settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings


class USIdentSettings(BaseSettings):
    """Settings read from ``USIDENT_*`` environment variables."""

    model_config = {"env_prefix": "USIDENT_"}

    log_level: str = "WARNING"
    log_rejections: bool = True  # DEBUG record per rejected identifier
    redact_input: bool = True  # identifiers are PII/bank data, mask them in logs


@lru_cache
def get_settings() -> USIdentSettings:
    """Get cached settings instance."""
    return USIdentSettings()
