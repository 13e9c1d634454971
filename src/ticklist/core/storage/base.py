"""
Abstract base class for storage backends.

Provides a unified synchronous key-value interface over local files,
process memory, etc. Values are opaque byte blobs.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from ..exceptions import TicklistError


class StorageBackend(ABC):
    """Abstract base class for storage backends."""

    def __init__(self, **config):
        self.config = config

    @abstractmethod
    def get(self, key: str) -> bytes:
        """Load the value stored under *key*. Raises StorageKeyError if not found."""

    @abstractmethod
    def set(self, key: str, data: bytes) -> None:
        """Store *data* under *key*, overwriting any prior value."""

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Check if a key exists in storage."""

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Delete a key. Returns True if deleted, False if it didn't exist."""

    @abstractmethod
    def keys(self, prefix: str = "") -> Iterator[str]:
        """Iterate stored keys with optional prefix filter."""


class StorageError(TicklistError):
    """Base exception for storage errors."""


class StorageKeyError(StorageError, KeyError):
    """Raised when a storage key doesn't exist."""


class StoragePermissionError(StorageError):
    """Raised when storage operation is not permitted."""


class StorageUnavailableError(StorageError):
    """Raised when a storage backend cannot be acquired at all."""
