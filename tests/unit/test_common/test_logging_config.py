"""
Tests for the logging dictConfig mapping.
"""

import logging
import logging.config

from crudmount.logging_config import build_logging_config


def test_levels_follow_argument():
    config = build_logging_config("DEBUG")

    assert config["root"]["level"] == "DEBUG"
    assert config["loggers"]["crudmount"]["level"] == "DEBUG"
    assert config["loggers"]["uvicorn"]["level"] == "INFO"


def test_uvicorn_access_log_is_quiet():
    config = build_logging_config("INFO")

    assert config["loggers"]["uvicorn.access"]["level"] == "WARNING"
    assert config["loggers"]["crudmount"]["propagate"] is False


def test_config_is_accepted_by_dict_config():
    logging.config.dictConfig(build_logging_config("INFO"))

    assert logging.getLogger("crudmount").level == logging.INFO
    assert logging.getLogger("uvicorn.access").level == logging.WARNING
