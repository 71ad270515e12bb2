import logging
import os
from logging.config import dictConfig

ROOT_LOGGER_NAME = "blinkshare"


def configure_logging(level=None):
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    if not isinstance(logging.getLevelName(level_name), int):
        level_name = "INFO"
    dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "std": {"format": "%(asctime)s %(name)s %(levelname)s: %(message)s"}
        },
        "handlers": {
            "console": {"class": "logging.StreamHandler", "formatter": "std"}
        },
        "root": {"handlers": ["console"], "level": level_name},
    })
    return logging.getLogger(ROOT_LOGGER_NAME)
