"""
Compression utilities for storage backends.

Only gzip is supported; it needs nothing beyond the standard library.
"""

import gzip
import json
from enum import Enum
from io import BytesIO
from typing import Any


class CompressionType(Enum):
    """Supported compression types."""

    NONE = "none"
    GZIP = "gzip"


def compress_bytes(data: bytes, compression: CompressionType = CompressionType.GZIP) -> bytes:
    """Compress binary data."""
    if compression == CompressionType.NONE:
        return data
    if compression == CompressionType.GZIP:
        buffer = BytesIO()
        with gzip.GzipFile(fileobj=buffer, mode="wb", compresslevel=6) as gz:
            gz.write(data)
        return buffer.getvalue()
    raise ValueError(f"Unsupported compression type: {compression}")


def decompress_bytes(data: bytes, compression: CompressionType = CompressionType.GZIP) -> bytes:
    """Decompress binary data."""
    if compression == CompressionType.NONE:
        return data
    if compression == CompressionType.GZIP:
        return gzip.decompress(data)
    raise ValueError(f"Unsupported compression type: {compression}")


def encode_json(obj: Any, compression: CompressionType = CompressionType.NONE) -> bytes:
    """JSON-serialize an object to UTF-8 bytes, optionally compressed."""
    json_str = json.dumps(obj, ensure_ascii=False, separators=(",", ":"))
    return compress_bytes(json_str.encode("utf-8"), compression)


def decode_json(data: bytes, compression: CompressionType = CompressionType.NONE) -> Any:
    """Decompress (if needed) and parse JSON bytes."""
    return json.loads(decompress_bytes(data, compression).decode("utf-8"))
