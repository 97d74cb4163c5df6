"""Configuration de l'application."""

from backoffice.infrastructure.config.settings import (
    Settings,
    ZeroLimitPolicy,
    get_settings,
)

__all__ = ["Settings", "ZeroLimitPolicy", "get_settings"]
