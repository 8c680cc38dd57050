"""Opt-in logging setup for applications embedding the Conversation client."""

import logging
import sys
from typing import Optional, Union

from common.config.config import APP_LOG_FILE, LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(
    level: Optional[Union[int, str]] = None,
    log_file: Optional[str] = None,
) -> None:
    """Configure root logging to stdout and, optionally, a file.

    Args:
        level: Log level name or number (defaults to LOG_LEVEL)
        log_file: Path of an append-mode log file (defaults to APP_LOG_FILE)
    """
    level = level if level is not None else LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handlers = [logging.StreamHandler(sys.stdout)]
    log_file = log_file or APP_LOG_FILE
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a"))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
