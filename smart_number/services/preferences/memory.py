"""
In-memory preference store.

Keeps values as the strings "true" / "false", the way the app's
key-value storage holds them.
"""

from typing import Optional

from smart_number.services.preferences.interface import (
    SHOW_FULL_NUMBERS_KEY,
    NumberPreferenceStore,
)


class InMemoryPreferenceStore(NumberPreferenceStore):
    """Preference store backed by a dict of strings."""

    def __init__(self, values: Optional[dict[str, str]] = None):
        self._values: dict[str, str] = dict(values or {})

    def get_show_full_numbers(self) -> bool:
        return self._values.get(SHOW_FULL_NUMBERS_KEY) == "true"

    def set_show_full_numbers(self, value: bool) -> None:
        self._values[SHOW_FULL_NUMBERS_KEY] = "true" if value else "false"

    def raw(self, key: str) -> Optional[str]:
        """Stored string for a key, as the platform storage would return it."""
        return self._values.get(key)
