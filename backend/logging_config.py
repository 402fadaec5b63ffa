"""Logging setup for the Garden API process.

The garden library only creates module loggers; this module decides where
their records go. ``GARDEN_LOG_LEVEL`` controls the ``garden`` namespace,
the backend and uvicorn together.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, Optional

from garden.exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_LEVEL_ENV = "GARDEN_LOG_LEVEL"
APP_LOGGER = "garden.backend"
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def resolve_log_level(level: Optional[str] = None) -> str:
    """Return a validated level name from ``level`` or the environment.

    Raises:
        ConfigurationError: If the name is not a standard logging level
    """
    name = (level or os.getenv(LOG_LEVEL_ENV) or "INFO").upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ConfigurationError(f"{LOG_LEVEL_ENV} must be a logging level name, got {name!r}")
    return name


def configure_logging(
    level: Optional[str] = None, *, extra_loggers: Iterable[str] = ()
) -> logging.Logger:
    """Route garden and server logs through one root handler.

    Safe to call more than once: ``basicConfig`` only installs a handler the
    first time, later calls just realign levels.

    Returns:
        The backend's application logger.
    """
    resolved = resolve_log_level(level)
    logging.basicConfig(level=resolved, format=LOG_FORMAT)

    for name in ("garden", *_SERVER_LOGGERS, *extra_loggers):
        logging.getLogger(name).setLevel(resolved)

    app_logger = logging.getLogger(APP_LOGGER)
    app_logger.debug("Log level set to %s", resolved)
    return app_logger
