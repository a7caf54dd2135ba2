"""Logging configuration for the application."""

import logging
import logging.config

from app.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


def setup_logging() -> None:
    """Configure the root logger from settings."""
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"default": {"format": LOG_FORMAT}},
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "root": {"handlers": ["console"], "level": settings.log_level.value},
            "loggers": {
                # SQL echo is controlled by settings.debug on the engine.
                "sqlalchemy.engine": {"level": "WARNING"},
            },
        }
    )
