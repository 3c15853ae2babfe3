"""Opt-in structlog output for selectorkit's own log events.

The library never configures logging by itself; applications that want to
see selector and JSON bridge events call :func:`setup_logging` once.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

from selectorkit.config.settings import get_settings
from selectorkit.exceptions import ConfigError

if TYPE_CHECKING:
    from selectorkit.config.settings import Settings

LIBRARY_LOGGER = "selectorkit"


def resolve_log_level(name: str) -> int:
    """Map a level name such as ``"debug"`` to its stdlib number."""
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        msg = f"Unknown log level: {name}"
        raise ConfigError(msg)
    return level


def setup_logging(settings: Settings | None = None) -> logging.Logger:
    """Render selectorkit events through the ``selectorkit`` stdlib logger.

    Uses ``settings`` (or the cached environment settings) for the level and
    for choosing between JSON and console output. Returns the configured
    stdlib logger; calling again replaces its handler.
    """
    settings = settings or get_settings()
    level = resolve_log_level(settings.log_level)

    if settings.log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for existing in list(library_logger.handlers):
        library_logger.removeHandler(existing)
    library_logger.addHandler(handler)
    library_logger.setLevel(level)
    return library_logger
