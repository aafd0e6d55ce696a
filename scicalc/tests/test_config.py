"""Tests for settings loading and logging setup."""

import logging

import pytest

from scicalc.config import Settings
from scicalc.logging_config import LOGGER_NAME, setup_logging


def test_defaults():
    s = Settings.from_env({})
    assert s.error_revert_s == 2.0
    assert s.message_revert_s == 1.0
    assert s.display_width == 12
    assert s.level == logging.WARNING


def test_env_overrides():
    s = Settings.from_env({
        "SCICALC_ERROR_REVERT_S": "0.5",
        "SCICALC_MESSAGE_REVERT_S": "0.25",
        "SCICALC_DISPLAY_WIDTH": "16",
        "SCICALC_LOG_LEVEL": "debug",
    })
    assert s.error_revert_s == 0.5
    assert s.message_revert_s == 0.25
    assert s.display_width == 16
    assert s.level == logging.DEBUG


@pytest.mark.parametrize("env", [
    {"SCICALC_ERROR_REVERT_S": "soon"},
    {"SCICALC_ERROR_REVERT_S": "-1"},
    {"SCICALC_DISPLAY_WIDTH": "4"},
    {"SCICALC_LOG_LEVEL": "LOUD"},
])
def test_invalid_env(env):
    with pytest.raises(ValueError):
        Settings.from_env(env)


def test_setup_logging_does_not_stack_handlers(tmp_path):
    log_file = tmp_path / "calc.log"
    setup_logging(logging.INFO)
    setup_logging(logging.DEBUG, str(log_file))
    logger = logging.getLogger(LOGGER_NAME)
    assert len(logger.handlers) == 2
    assert logger.level == logging.DEBUG

    logging.getLogger("scicalc.engine").debug("hello")
    for h in logger.handlers:
        h.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")

    setup_logging(logging.WARNING)
    assert len(logger.handlers) == 1
