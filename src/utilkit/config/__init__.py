"""Configuration layer — settings and logging setup."""

from utilkit.config.logging import configure_from_settings, configure_logging
from utilkit.config.settings import UtilkitSettings, get_settings, reset_settings

__all__ = [
    "UtilkitSettings",
    "configure_from_settings",
    "configure_logging",
    "get_settings",
    "reset_settings",
]
