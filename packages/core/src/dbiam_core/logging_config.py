"""Logging setup for processes embedding the dbiam packages.

Every package logs through ``logging.getLogger("dbiam.<area>")``; this
module only wires handlers and levels.
"""

from __future__ import annotations

import logging.config
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .config import DbiamSettings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def build_logging_config(settings: DbiamSettings) -> dict[str, Any]:
    """Translate settings into a :func:`logging.config.dictConfig` mapping."""
    loggers: dict[str, Any] = {
        "dbiam": {"level": settings.log_level, "propagate": True},
    }
    for name, level in settings.module_log_levels.items():
        loggers[name] = {"level": level.upper(), "propagate": True}
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": {"format": LOG_FORMAT}},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
            }
        },
        "loggers": loggers,
        "root": {"level": "WARNING", "handlers": ["console"]},
    }


def configure_logging(settings: DbiamSettings) -> None:
    logging.config.dictConfig(build_logging_config(settings))
