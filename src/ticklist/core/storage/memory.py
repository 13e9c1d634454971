"""In-memory storage backend.

Nothing survives the process. Used by tests and as the memory-only
fallback when no durable storage is wanted.
"""

from collections.abc import Iterator

from .base import StorageBackend, StorageKeyError


class MemoryStorage(StorageBackend):
    """Dict-backed storage backend."""

    def __init__(self, **config):
        super().__init__(**config)
        self._data: dict[str, bytes] = {}

    def get(self, key: str) -> bytes:
        try:
            return self._data[key]
        except KeyError:
            raise StorageKeyError(f"Key not found: {key}") from None

    def set(self, key: str, data: bytes) -> None:
        self._data[key] = bytes(data)

    def exists(self, key: str) -> bool:
        return key in self._data

    def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    def keys(self, prefix: str = "") -> Iterator[str]:
        for key in sorted(self._data):
            if key.startswith(prefix):
                yield key
