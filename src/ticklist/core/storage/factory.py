"""Build the configured storage backend."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from ..exceptions import ConfigurationError
from .base import StorageBackend
from .local import LocalStorage
from .memory import MemoryStorage

if TYPE_CHECKING:
    from ..config import Config

BACKENDS = ("local", "memory")


def open_storage(config: Config) -> StorageBackend:
    """Create the backend named by ``storage.backend``.

    Raises:
        ConfigurationError: Unknown backend name.
        StorageUnavailableError: The backend could not be acquired.
    """
    backend = str(config.get("storage.backend", "local")).lower()
    if backend == "memory":
        logger.info("Using memory-only storage; entries will not survive restart")
        return MemoryStorage()
    if backend == "local":
        compress = config.get("storage.compress", False)
        if isinstance(compress, str):
            compress = compress.strip().lower() in ("1", "true", "yes", "on")
        return LocalStorage(base_path=config.get("storage.path"), compress=bool(compress))
    raise ConfigurationError(f"Unknown storage backend '{backend}'. Expected one of: {', '.join(BACKENDS)}")
