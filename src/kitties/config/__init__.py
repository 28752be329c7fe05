"""Configuration module using Pydantic Settings.

Usage:
    from kitties.config import KittiesSettings, GenesisConfig, configure_logging

    settings = KittiesSettings(atomic_exchange=True)
    configure_logging(settings)
"""

from kitties.config.log_setup import configure_logging
from kitties.config.settings import GenesisConfig, KittiesSettings

__all__ = [
    "KittiesSettings",
    "GenesisConfig",
    "configure_logging",
]
