"""
Storage backends for ticklist.

Provides a synchronous key-value interface with optional gzip compression
and a pluggable backend interface (local filesystem by default).
"""

from .base import (
    StorageBackend,
    StorageError,
    StorageKeyError,
    StoragePermissionError,
    StorageUnavailableError,
)
from .compression import (
    CompressionType,
    compress_bytes,
    decode_json,
    decompress_bytes,
    encode_json,
)
from .factory import open_storage
from .local import LocalStorage
from .memory import MemoryStorage

__all__ = [
    "CompressionType",
    "LocalStorage",
    "MemoryStorage",
    "StorageBackend",
    "StorageError",
    "StorageKeyError",
    "StoragePermissionError",
    "StorageUnavailableError",
    "compress_bytes",
    "decode_json",
    "decompress_bytes",
    "encode_json",
    "open_storage",
]
