"""Logging configuration with Rich formatting.

Module loggers live under the "narrative_analyzer" hierarchy
(get_logger(__name__)), so callers can tune the package separately from
their own logging. setup_logging() is for scripts; library users keep
their existing configuration.
"""

import logging
from typing import Optional
from rich.logging import RichHandler
from .config import get_settings

PACKAGE_LOGGER = "narrative_analyzer"

def setup_logging(level: Optional[str] = None):
    settings = get_settings()
    level = level or settings.LOG_LEVEL
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)]
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)

    # Quiet down some noisy libraries
    for noisy in ("httpx", "openai", "mlflow"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

def get_logger(name: str):
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
