"""
Logging Setup - NeuRazor Scoring Engine
neurazor/core/logging.py

Wires stdlib logging and structlog from Settings.LOG_LEVEL / LOG_FORMAT.
"""

import logging
import sys
from typing import Optional

import structlog

from neurazor.config import Settings, settings as default_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging level and structlog rendering (json or console)."""
    settings = settings or default_settings
    level = getattr(logging, settings.LOG_LEVEL)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
        force=True,
    )

    if settings.LOG_FORMAT == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
