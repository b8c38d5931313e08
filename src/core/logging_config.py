import logging
import os
from typing import Optional

from src.core.config import (
    DEFAULT_LOG_DATEFMT,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    LOG_DATEFMT_ENV,
    LOG_FORMAT_ENV,
    LOG_LEVEL_ENV,
)

_configured: Optional[str | int] = None


def configure_logging(
    level: Optional[str | int] = None,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
) -> str | int:
    """Configure root logging once with a consistent format.

    Environment overrides:
    - `OOP_CHEATSHEET_LOG_LEVEL`
    - `OOP_CHEATSHEET_LOG_FORMAT`
    - `OOP_CHEATSHEET_LOG_DATEFMT`
    """
    global _configured

    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    if isinstance(level, str):
        level = level.upper()

    if _configured is not None and _configured == level:
        return level

    fmt = fmt if fmt is not None else os.getenv(LOG_FORMAT_ENV, DEFAULT_LOG_FORMAT)
    datefmt = datefmt if datefmt is not None else os.getenv(LOG_DATEFMT_ENV, DEFAULT_LOG_DATEFMT)

    root = logging.getLogger()
    if root.handlers:
        # Handlers installed elsewhere (e.g. pytest) keep their format
        root.setLevel(level)
    else:
        logging.basicConfig(level=level, format=fmt, datefmt=datefmt)

    # Only a level accepted by logging is remembered
    _configured = level
    return level


def get_logger(name: str) -> logging.Logger:
    """Return a module-scoped logger."""
    configure_logging()
    return logging.getLogger(name)
