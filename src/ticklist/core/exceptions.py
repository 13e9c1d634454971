"""
Ticklist exception hierarchy.

All ticklist exceptions inherit from TicklistError, making it easy for consumers
to catch library-level errors while still distinguishing specific failure modes.
"""


class TicklistError(Exception):
    """Base exception class for all ticklist errors."""


class ConfigurationError(TicklistError):
    """Raised for configuration errors (missing keys, invalid values)."""


class EntryIndexError(TicklistError, IndexError):
    """Raised when a filtered-view index does not address any entry.

    This means the caller's view of the list is out of sync with the store,
    so it is never silently ignored.
    """

    def __init__(self, index: int, size: int):
        super().__init__(f"Filtered index {index} out of range for view of {size} entries")
        self.index = index
        self.size = size


class SearchPatternError(TicklistError, ValueError):
    """Raised when search text cannot be compiled as a pattern."""
