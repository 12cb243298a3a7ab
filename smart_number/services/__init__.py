"""Services package."""

from smart_number.services.preferences import (
    SHOW_FULL_NUMBERS_KEY,
    InMemoryPreferenceStore,
    NumberPreferenceStore,
    PreferenceStoreError,
)

__all__ = [
    # Preference services
    "InMemoryPreferenceStore",
    "NumberPreferenceStore",
    "PreferenceStoreError",
    "SHOW_FULL_NUMBERS_KEY",
]
