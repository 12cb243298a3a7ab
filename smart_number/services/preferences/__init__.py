"""
Preference Services Package

Abstract interface for the display preferences and an in-memory
implementation for tests and previews.
"""

from smart_number.services.preferences.interface import (
    SHOW_FULL_NUMBERS_KEY,
    NumberPreferenceStore,
    PreferenceStoreError,
)
from smart_number.services.preferences.memory import InMemoryPreferenceStore

__all__ = [
    # Interfaces
    "NumberPreferenceStore",
    "SHOW_FULL_NUMBERS_KEY",
    # Exceptions
    "PreferenceStoreError",
    # In-memory implementation
    "InMemoryPreferenceStore",
]
