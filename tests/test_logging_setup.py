"""Tests for configure_logging()."""

import logging

import pytest

from axisframe.logging_setup import LOG_FORMAT, configure_logging

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def restore_package_logger():
    pkg = logging.getLogger("axisframe")
    saved_handlers, saved_level = pkg.handlers[:], pkg.level
    yield
    for handler in pkg.handlers[:]:
        pkg.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        pkg.addHandler(handler)
    pkg.setLevel(saved_level)


def test_level_from_config(make_config):
    logger = configure_logging(make_config(LOG_LEVEL="DEBUG"))
    assert logger.name == "axisframe"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logger.handlers[0].formatter._fmt == LOG_FORMAT


def test_reconfiguring_replaces_handlers(internal_config):
    configure_logging(internal_config)
    logger = configure_logging(internal_config)
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO


def test_file_handler(tmp_path, internal_config):
    log_file = tmp_path / "logs" / "axisframe.log"
    logger = configure_logging(internal_config, log_path=log_file)
    assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)
    logging.getLogger("axisframe.variable").warning("reshape fell back to resize")
    for handler in logger.handlers:
        handler.flush()
    assert "axisframe.variable - WARNING - reshape fell back to resize" in log_file.read_text()
