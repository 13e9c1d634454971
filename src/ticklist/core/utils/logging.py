"""
Logging setup driven by the ``logging`` config section.

Console output always goes to stderr. When ``logging.file`` is set, a
rotating file sink is added; relative file names land in ``paths.log_dir``.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

from loguru import logger

from ..exceptions import ConfigurationError

if TYPE_CHECKING:
    from ..config import Config

CONSOLE_FORMAT = "<level>[{level.name}]</level> {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{line} | {message}"


def log_file_path(config: Config) -> str | None:
    """Resolve ``logging.file`` against ``paths.log_dir``. None when file logging is off."""
    log_file = config.get("logging.file")
    if not log_file:
        return None
    log_dir = os.path.expanduser(config.get("paths.log_dir", "."))
    return os.path.join(log_dir, os.path.expanduser(str(log_file)))


def setup_logging(config: Config, verbose: bool = False) -> str | None:
    """
    Replace loguru's sinks according to *config*.

    Args:
        config: Source of ``logging.level``, ``logging.file``, ``logging.rotation``,
            ``logging.retention`` and ``paths.log_dir``.
        verbose: Force DEBUG regardless of ``logging.level``.

    Returns:
        Path of the log file, or None when only stderr is used.

    Raises:
        ConfigurationError: ``logging.level`` is not a loguru level name.
    """
    level = "DEBUG" if verbose else str(config.get("logging.level", "WARNING")).upper()
    try:
        logger.level(level)
    except ValueError:
        raise ConfigurationError(f"Unknown logging.level '{level}'") from None

    logger.remove()
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)

    path = log_file_path(config)
    if path:
        config.ensure_directories()
        logger.add(
            path,
            level=level,
            format=FILE_FORMAT,
            rotation=config.get("logging.rotation", "10 MB"),
            retention=config.get("logging.retention", "7 days"),
        )
    return path
