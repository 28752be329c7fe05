"""Logging setup for the kitties package.

The library never installs handlers; applications own handler configuration.
"""

from __future__ import annotations

import logging

from kitties.config.settings import KittiesSettings


def configure_logging(settings: KittiesSettings | None = None) -> logging.Logger:
    """Apply the configured level to the package logger.

    Returns:
        The "kitties" logger.
    """
    settings = settings or KittiesSettings()
    logger = logging.getLogger("kitties")
    logger.setLevel(settings.log_level)
    return logger
