"""Logging setup for the Streamlit page and the API.

Both entry points call ``configure_logging(settings)`` at import time; the
Streamlit script re-runs on every interaction, so configuration has to be
idempotent. ``dictConfig`` replaces the handlers of the loggers it names
instead of stacking new ones.
"""

from __future__ import annotations

import logging
import logging.config
from typing import Any, Dict

from evoviz.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
APP_LOGGERS = ("evoviz", "api")


def logging_dict(settings: Settings) -> Dict[str, Any]:
    handlers: Dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "plain",
            "stream": "ext://sys.stdout",
        },
    }
    if settings.log_file:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "plain",
            "filename": settings.log_file,
            "encoding": "utf-8",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"plain": {"format": LOG_FORMAT, "datefmt": LOG_DATEFMT}},
        "handlers": handlers,
        "loggers": {
            name: {"level": settings.log_level, "handlers": sorted(handlers), "propagate": False}
            for name in APP_LOGGERS
        },
    }


def configure_logging(settings: Settings) -> logging.Logger:
    logging.config.dictConfig(logging_dict(settings))
    logger = logging.getLogger("evoviz")
    logger.debug("logging configured at %s", settings.log_level)
    return logger
