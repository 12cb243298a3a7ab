"""
Abstract Preference Store Interface

DESIGN DECISION: The "show full numbers" switch lives in the host app's
key-value storage. We only depend on this interface, which allows us to:
1. Use the platform storage in the app
2. Use in-memory storage for testing

Reads and writes are synchronous, like the rest of the numeric core.
"""

from abc import ABC, abstractmethod


SHOW_FULL_NUMBERS_KEY = "showFullNumbers"


class NumberPreferenceStore(ABC):
    """
    Abstract interface for the number display preference.

    Any storage implementation must implement these methods.
    """

    @abstractmethod
    def get_show_full_numbers(self) -> bool:
        """
        Read the "show full numbers" preference.

        Returns:
            True if compact notation is disabled; False when never set

        Raises:
            PreferenceStoreError: If the storage cannot be read
        """
        pass

    @abstractmethod
    def set_show_full_numbers(self, value: bool) -> None:
        """
        Persist the "show full numbers" preference.

        Raises:
            PreferenceStoreError: If the storage cannot be written
        """
        pass


# =============================================================================
# EXCEPTIONS
# =============================================================================

class PreferenceStoreError(Exception):
    """Base exception for preference storage operations."""
    pass
