"""Shared service configuration package."""

from .settings import (
    ConfigError,
    Settings,
    load_settings,
)

__all__ = [
    "ConfigError",
    "Settings",
    "load_settings",
]
