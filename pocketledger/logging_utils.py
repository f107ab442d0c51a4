"""Mini README: Application-wide logging helpers for pocketledger.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * configure_root_logger - installs the shared handler and picks the level.

Usage:
    Modules declare ``LOGGER = get_logger(__name__)``. Entry points (CLI and
    web server) call ``configure_root_logger`` with the configured level.
    The handler is installed only once; an explicit level always applies.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def _coerce_level(level: Union[int, str]) -> int:
    """Translate textual level names such as ``"debug"`` into logging constants."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_root_logger(level: Optional[Union[int, str]] = None) -> None:
    """Install the shared handler once and apply ``level`` when one is given.

    The implicit call made by ``get_logger`` passes no level, so it never
    overrides a level chosen later by an entry point.
    """

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if not _LOGGER_INITIALISED:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.setLevel(logging.INFO)
        root_logger.addHandler(handler)
        _LOGGER_INITIALISED = True

    if level is not None:
        root_logger.setLevel(_coerce_level(level))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
