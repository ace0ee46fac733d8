"""Logging setup and log-safe rendering of identifier input."""

from __future__ import annotations

import logging

from usident.core.config import USIdentSettings, get_settings

PACKAGE_LOGGER = "usident"


def configure_logging(settings: USIdentSettings | None = None) -> logging.Logger:
    """Apply the configured log level to the package logger.

    Handlers are left to the application; the package only installs a
    ``NullHandler``.
    """
    if settings is None:
        settings = get_settings()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(settings.log_level.upper())
    return logger


def redact(text: object, visible: int = 4) -> str:
    """Mask all but the last ``visible`` characters of ``text``."""
    rendered = str(text)
    if len(rendered) <= visible:
        return "*" * len(rendered)
    return "*" * (len(rendered) - visible) + rendered[-visible:]
