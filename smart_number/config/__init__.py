"""Configuration package."""

from smart_number.config.settings import (
    AppSettings,
    FormatterSettings,
    Settings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "FormatterSettings",
    "Settings",
    "get_settings",
    "validate_all_settings",
]
