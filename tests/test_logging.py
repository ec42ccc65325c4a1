import pytest
import structlog

from excuse_engine.logging import setup_logging


def test_setup_logging_json():
    setup_logging("DEBUG", "json")
    structlog.get_logger("test").debug("logging.configured", fmt="json")


def test_setup_logging_console():
    setup_logging("info", "console")
    structlog.get_logger("test").info("logging.configured", fmt="console")


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        setup_logging("LOUD")
