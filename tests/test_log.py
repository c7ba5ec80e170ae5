"""Tests for log module"""

import logging

import pytest

from cmsconfig import log


@pytest.fixture
def reset_logger():
    yield
    logger = logging.getLogger("cmsconfig")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_setup_console_only(reset_logger):
    log.setup()

    handlers = logging.getLogger("cmsconfig").handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)
    assert handlers[0].level == logging.INFO


def test_setup_with_logfile(tmp_path, reset_logger):
    logfile = tmp_path / "logs" / "cmsconfig.log"

    log.setup(logfile)
    logging.getLogger("cmsconfig.test").debug("debug line")
    for handler in logging.getLogger("cmsconfig").handlers:
        handler.flush()

    assert logfile.exists()
    assert "debug line" in logfile.read_text()


def test_setup_verbose(reset_logger):
    log.setup(verbose=True)

    assert logging.getLogger("cmsconfig").handlers[0].level == logging.DEBUG


def test_setup_does_not_mutate_default_config(tmp_path, reset_logger):
    log.setup(tmp_path / "cmsconfig.log")

    assert log.LOGGING_CONFIG["loggers"]["cmsconfig"]["handlers"] == ["console"]
    assert "file" in log.LOGGING_CONFIG["handlers"]
