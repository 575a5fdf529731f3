from __future__ import annotations

import logging
from logging.config import dictConfig

from .config import settings

PACKAGE_LOGGER = "loess1d"


def setup_logging(level: str | None = None) -> None:
    """Send ``loess1d`` log records to the console.

    Only the package logger is configured; other loggers keep their setup.
    ``level`` overrides ``settings.log_level``.
    """
    name = (level or settings.log_level).upper()
    numeric = getattr(logging, name, logging.INFO)

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "loess": {
                "format": "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
            }
        },
        "handlers": {
            "loess_console": {
                "class": "logging.StreamHandler",
                "formatter": "loess",
                "level": numeric,
            }
        },
        "loggers": {
            PACKAGE_LOGGER: {
                "handlers": ["loess_console"],
                "level": numeric,
                "propagate": False,
            }
        },
    }

    dictConfig(config)


__all__ = ["PACKAGE_LOGGER", "setup_logging"]
