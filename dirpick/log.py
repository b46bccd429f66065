"""Logging setup for the CLI.

Log records go to stderr unless a log file is configured, either explicitly
or through ``DIRPICK_LOG_FILE``, which keeps them off the alternate screen.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

LOG_FILE_ENV = "DIRPICK_LOG_FILE"
LOG_FORMAT = "%(levelname)s %(name)s %(message)s"


def get_logger(name: str = "dirpick") -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(
    *,
    level: str = "warning",
    stream=None,
    log_file: Path | None = None,
) -> logging.Handler:
    normalized = level.strip().upper()
    level_value = getattr(logging, normalized, logging.WARNING)
    if log_file is None:
        env_file = os.environ.get(LOG_FILE_ENV)
        if env_file:
            log_file = Path(env_file)
    if stream is None and log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger = get_logger()
    logger.setLevel(level_value)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
    return handler
