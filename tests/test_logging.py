"""Tests for config-driven logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from wfindex.config import LoggingConfig
from wfindex.logging import configure_logging, get_logger, resolve_level


@pytest.fixture(autouse=True)
def restore_wfindex_logger():
    logger = logging.getLogger("wfindex")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    handlers, level, propagate = saved
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate


def test_get_logger_nests_under_package_logger() -> None:
    assert get_logger().name == "wfindex"
    assert get_logger("scanner").name == "wfindex.scanner"


def test_verbose_flag_or_config_enables_debug() -> None:
    assert resolve_level(LoggingConfig()) == logging.INFO
    assert resolve_level(LoggingConfig(verbose=True)) == logging.DEBUG
    assert resolve_level(LoggingConfig(), verbose=True) == logging.DEBUG
    assert resolve_level(LoggingConfig(verbose=True), verbose=False) == logging.DEBUG


def test_configure_logging_defaults_to_console_only() -> None:
    logger = configure_logging()

    assert logger.level == logging.INFO
    assert logger.propagate is False
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)


def test_configured_file_sink_receives_component_logs(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "wfindex.log"

    logger = configure_logging(LoggingConfig(file=log_file), verbose=True)
    get_logger("languages.conventions").debug("Skipping %s", "workflow/envs")
    for handler in logger.handlers:
        handler.flush()

    assert logger.level == logging.DEBUG
    text = log_file.read_text(encoding="utf-8")
    assert "DEBUG wfindex.languages.conventions: Skipping workflow/envs" in text


def test_repeated_configuration_replaces_handlers(tmp_path: Path) -> None:
    configure_logging(LoggingConfig(file=tmp_path / "first.log"))
    logger = configure_logging(LoggingConfig())

    assert len(logger.handlers) == 1
    assert not any(isinstance(handler, logging.FileHandler) for handler in logger.handlers)
