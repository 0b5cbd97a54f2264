"""Configuration module."""

from __future__ import annotations

from dailycal.config.settings import (
    OUTPUT_FORMATS,
    Settings,
    default_config_path,
    get_settings,
    reload_settings,
)

__all__ = [
    "OUTPUT_FORMATS",
    "Settings",
    "default_config_path",
    "get_settings",
    "reload_settings",
]
