"""
Logging Configuration

One console handler shared by the crudmount loggers and uvicorn. Request lines
come from crudmount.middleware.request_log, so uvicorn's own access log is
reduced to warnings.
"""

import logging
import logging.config
from typing import Any

from crudmount.config import get_settings

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def build_logging_config(level: str) -> dict[str, Any]:
    """
    Build the dictConfig mapping

    Args:
        level: Level of the root and crudmount loggers

    Returns:
        dict: Configuration for logging.config.dictConfig
    """

    def console_logger(logger_level: str) -> dict[str, Any]:
        return {"handlers": ["console"], "level": logger_level, "propagate": False}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {"handlers": ["console"], "level": level},
        "loggers": {
            "crudmount": console_logger(level),
            "uvicorn": console_logger("INFO"),
            "uvicorn.error": console_logger("INFO"),
            "uvicorn.access": console_logger("WARNING"),
        },
    }


def setup_logging() -> None:
    """Apply the logging configuration, DEBUG level when settings.DEBUG is set"""
    level = "DEBUG" if get_settings().DEBUG else "INFO"
    logging.config.dictConfig(build_logging_config(level))
