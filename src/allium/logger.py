"""Application logging utilities."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from . import config
from .data_paths import log_dir

_LOG_FILE_NAME = "allium.log"
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(name: str) -> int:
    """Map a level name such as ``debug`` to its number; unknown names mean INFO."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> logging.Logger:
    """Configure the ``allium`` logger once: rotating file in the data dir plus stderr."""
    logger = logging.getLogger("allium")
    if logger.handlers:
        return logger

    logger.setLevel(resolve_level(config.LOG_LEVEL))
    formatter = logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handler = RotatingFileHandler(
        log_dir() / _LOG_FILE_NAME,
        maxBytes=1_048_576,
        backupCount=5,
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    # stderr: warnings and worse
    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(logging.WARNING)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    logger.debug("Logging to %s at level %s", handler.baseFilename, config.LOG_LEVEL)
    return logger
