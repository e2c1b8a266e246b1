#!/usr/bin/env python3

import logging
import logging.config

from pythonjsonlogger import jsonlogger

from .config import hal_config


def setup_logging(level: str | None = None):
    """Setup JSON logging configuration.

    Applications embedding hal_core call this once at startup; the library
    itself only emits records through module loggers.
    """
    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": jsonlogger.JsonFormatter,
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s"
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": "ext://sys.stdout"
            }
        },
        "loggers": {
            "": {
                "handlers": ["console"],
                "level": (level or hal_config.LOG_LEVEL).upper(),
                "propagate": False
            }
        }
    }

    logging.config.dictConfig(logging_config)
