"""
Logging set-up for the ``brainstormer_api`` package.

Only the package logger is configured; the root logger and the
loggers of the ASGI server are left to their own configuration.  The
level comes from ``Settings.log_level`` unless ``Settings.debug`` is
on, and ``Settings.log_file`` adds a file handler next to the console
one.
"""

import logging
from pathlib import Path

from .config import Settings

PACKAGE_LOGGER = "brainstormer_api"


def _formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def resolve_level(settings: Settings) -> int:
    """Numeric level for ``settings``; unknown names mean ``INFO``."""
    if settings.debug:
        return logging.DEBUG
    level = logging.getLevelName(settings.log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(settings: Settings, name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Attach handlers to the ``name`` logger and return it.

    Handlers are installed on the first call only, so building several
    applications in one process (as the tests do) does not duplicate
    output.  Later calls still apply the level from ``settings``.
    """
    logger = logging.getLogger(name)
    logger.setLevel(resolve_level(settings))
    if logger.handlers:
        return logger

    handlers = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(_formatter())
        logger.addHandler(handler)
    logger.propagate = False
    return logger
