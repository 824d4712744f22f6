"""Logging setup for lazytree.

Library modules log through ``logging.getLogger(__name__)``. Nothing is
written to the terminal: unless a log directory is configured, records go
to a ``NullHandler``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

LOG_DIR_ENV = "LAZYTREE_LOG_DIR"
LOG_LEVEL_ENV = "LAZYTREE_LOG_LEVEL"
LOG_FILENAME = "lazytree.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def get_logger(name: str = "lazytree") -> logging.Logger:
    return logging.getLogger(name)


def default_log_level() -> str:
    """Return the level named by ``LAZYTREE_LOG_LEVEL`` or ``warning``."""
    return os.environ.get(LOG_LEVEL_ENV, "warning")


def configure_logging(
    *,
    level: str | None = None,
    log_dir: Path | None = None,
    filename: str = LOG_FILENAME,
) -> logging.Handler:
    """Attach one handler to the ``lazytree`` logger and return it.

    ``log_dir`` (or ``LAZYTREE_LOG_DIR``) selects a log file; without either
    a ``NullHandler`` is installed. Calling again replaces the handler.
    """
    normalized = (level or default_log_level()).strip().upper()
    level_value = getattr(logging, normalized, logging.WARNING)
    if not isinstance(level_value, int):
        level_value = logging.WARNING

    env_dir = os.environ.get(LOG_DIR_ENV)
    if log_dir is None and env_dir:
        log_dir = Path(env_dir)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_dir / filename, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.NullHandler()

    logger = get_logger()
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()
    logger.addHandler(handler)
    logger.setLevel(level_value)
    logger.propagate = False
    return handler


__all__ = [
    "LOG_DIR_ENV",
    "LOG_LEVEL_ENV",
    "get_logger",
    "default_log_level",
    "configure_logging",
]
