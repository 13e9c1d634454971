"""
Local filesystem storage backend.

Each key is one file under ``base_path``, optionally gzip-compressed.
"""

import os
from collections.abc import Iterator
from pathlib import Path

from loguru import logger

from .base import StorageBackend, StorageKeyError, StoragePermissionError, StorageUnavailableError
from .compression import CompressionType, compress_bytes, decompress_bytes

_GZ_SUFFIX = ".gz"


class LocalStorage(StorageBackend):
    """Local filesystem storage backend."""

    def __init__(self, base_path: str = "~/.ticklist-data/storage", compress: bool = False, **config):
        super().__init__(**config)
        self.base_path = Path(base_path).expanduser().resolve()
        self.compress = compress
        try:
            self.base_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageUnavailableError(f"Cannot create storage directory {self.base_path}: {e}") from e

    def _get_full_path(self, key: str) -> Path:
        """Resolve a storage key to an absolute path under ``base_path``.

        Rejects unsafe keys (absolute paths, traversal, empty keys, and
        backslash-delimited paths) to prevent writes outside ``base_path``.
        """
        raw_key = key.strip()
        if not raw_key:
            raise StoragePermissionError("Storage key cannot be empty.")
        if "\x00" in raw_key:
            raise StoragePermissionError("Storage key cannot contain null bytes.")
        if "\\" in raw_key:
            raise StoragePermissionError("Storage key cannot contain backslashes. Use '/' separators.")

        key_path = Path(raw_key)
        if key_path.is_absolute() or raw_key.startswith("~"):
            raise StoragePermissionError(f"Unsafe storage key '{key}': absolute paths are not allowed.")

        full_path = (self.base_path / key_path).resolve()
        try:
            full_path.relative_to(self.base_path)
        except ValueError as e:
            raise StoragePermissionError(f"Unsafe storage key '{key}': path traversal is not allowed.") from e
        return full_path

    @staticmethod
    def _gz(path: Path) -> Path:
        return path.with_name(path.name + _GZ_SUFFIX)

    def get(self, key: str) -> bytes:
        path = self._get_full_path(key)
        compressed = False
        if not path.exists() and self._gz(path).exists():
            path = self._gz(path)
            compressed = True

        if not path.exists():
            raise StorageKeyError(f"Key not found: {key}")

        try:
            data = path.read_bytes()
        except PermissionError as e:
            raise StoragePermissionError(f"Cannot read {path}: {e}") from e

        if compressed:
            data = decompress_bytes(data, CompressionType.GZIP)
        return data

    def set(self, key: str, data: bytes) -> None:
        plain_path = self._get_full_path(key)
        path = plain_path
        if self.compress:
            data = compress_bytes(data, CompressionType.GZIP)
            path = self._gz(plain_path)

        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_name(path.name + ".tmp")
        try:
            tmp_path.write_bytes(data)
            os.replace(tmp_path, path)
        except PermissionError as e:
            raise StoragePermissionError(f"Cannot write to {path}: {e}") from e

        # Drop the sibling written under the other compression setting
        stale = plain_path if self.compress else self._gz(plain_path)
        if stale.exists():
            stale.unlink()
        logger.debug(f"Stored {len(data)} bytes under '{key}'")

    def exists(self, key: str) -> bool:
        path = self._get_full_path(key)
        return path.exists() or self._gz(path).exists()

    def delete(self, key: str) -> bool:
        path = self._get_full_path(key)
        deleted = False
        for p in (path, self._gz(path)):
            if p.exists():
                p.unlink()
                deleted = True
        return deleted

    def keys(self, prefix: str = "") -> Iterator[str]:
        base_len = len(str(self.base_path)) + 1
        for root, _dirs, files in os.walk(self.base_path):
            for file in sorted(files):
                if file.endswith(".tmp"):
                    continue
                key = str(Path(root) / file)[base_len:]
                if key.endswith(_GZ_SUFFIX):
                    key = key[: -len(_GZ_SUFFIX)]
                if prefix and not key.startswith(prefix):
                    continue
                yield key
