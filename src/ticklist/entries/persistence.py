"""Persistence gateway — saves the entry list to one storage slot.

The blob is a JSON array of ``{"description", "status"}`` objects with no
version field. Anything that fails to decode is discarded and the caller
starts over from an empty (or placeholder) list.
"""

from __future__ import annotations

import json
import zlib
from collections.abc import Sequence

from loguru import logger

from ..core.config import DEFAULT_STORAGE_KEY
from ..core.storage import StorageBackend, StorageKeyError, StoragePermissionError, decode_json, encode_json
from . import placeholders
from .models import Entry


class PersistenceGateway:
    """Serializes entries to and from a single key of a storage backend."""

    def __init__(self, storage: StorageBackend, key: str = DEFAULT_STORAGE_KEY):
        self.storage = storage
        self.key = key

    def save(self, entries: Sequence[Entry]) -> None:
        """Overwrite the slot with *entries*, in order."""
        self.storage.set(self.key, encode_json([entry.to_dict() for entry in entries]))
        logger.debug(f"Saved {len(entries)} entries to '{self.key}'")

    def load(self) -> list[Entry] | None:
        """Read the slot back.

        Returns:
            The stored entries, or None when the slot is empty or unreadable.

        Raises:
            StoragePermissionError: The slot exists but cannot be read.
        """
        try:
            payload = decode_json(self.storage.get(self.key))
            if not isinstance(payload, list):
                raise TypeError(f"expected a list, got {type(payload).__name__}")
            return [Entry.from_dict(item) for item in payload]
        except StorageKeyError:
            logger.debug(f"No saved entries under '{self.key}'")
            return None
        except StoragePermissionError:
            raise
        # A corrupt gzip slot surfaces as OSError/EOFError/zlib.error from decompression
        except (OSError, EOFError, zlib.error, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Discarding unreadable entries under '{self.key}': {e}")
            return None

    def load_or_default(self, placeholder_count: int = 0) -> list[Entry]:
        """Startup helper: saved entries, else placeholders, else an empty list."""
        entries = self.load()
        if entries is not None:
            logger.info(f"Restored {len(entries)} entries from '{self.key}'")
            return entries
        if placeholder_count > 0:
            logger.info(f"Seeding {placeholder_count} placeholder entries")
            return placeholders.generate(placeholder_count)
        return []
