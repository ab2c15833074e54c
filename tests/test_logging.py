import sys

import pytest
from loguru import logger

from monerorequest.core.logging import configure_logger
from monerorequest.core.settings import settings


@pytest.fixture
def debug_settings():
    settings.debug = True
    settings.log_level = "INFO"
    yield
    settings.debug = False
    settings.log_level = "TRACE"
    logger.remove()
    logger.add(sys.stderr)


def test_configure_logger_debug(debug_settings, capsys):
    configure_logger()
    logger.debug("codec step")
    err = capsys.readouterr().err
    assert "DEBUG" in err
    assert "codec step" in err
    assert "test_logging:test_configure_logger_debug" in err


def test_configure_logger_level(capsys):
    settings.log_level = "WARNING"
    try:
        configure_logger()
        logger.info("hidden")
        logger.warning("shown")
    finally:
        settings.log_level = "TRACE"
        logger.remove()
        logger.add(sys.stderr)
    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err
