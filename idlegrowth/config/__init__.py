"""Configuration package."""

from idlegrowth.config.settings import (
    GameSettings,
    get_settings,
)

__all__ = [
    "GameSettings",
    "get_settings",
]
