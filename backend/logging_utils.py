"""Logging helpers.

Configuration happens only from the entry point, never on import.
"""

from __future__ import annotations

import logging
from typing import Optional

from backend import config

logger = logging.getLogger(config.LOGGER_NAME)


def get_logger(name: str) -> logging.Logger:
    """Return a child of the application logger, e.g. ``login_demo.state``."""
    return logger.getChild(name.rsplit(".", 1)[-1])


def configure_logging(level: Optional[int] = None) -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL if level is None else level,
        format=config.LOG_FORMAT,
    )
