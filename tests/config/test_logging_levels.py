# topmark:header:start
#
#   project      : StatemLog
#   file         : test_logging_levels.py
#   file_relpath : tests/config/test_logging_levels.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for StatemLog's own logging setup."""

from __future__ import annotations

import logging

import pytest

from statemlog.config.logging import (
    TRACE_LEVEL,
    ChalkFormatter,
    StatemLogger,
    get_logger,
    parse_log_level,
    resolve_env_log_level,
    setup_logging,
)
from statemlog.constants import LOG_LEVEL_ENV_VAR
from tests.conftest import parametrize


@parametrize(
    ("value", "expected"),
    [
        ("trace", TRACE_LEVEL),
        ("DEBUG", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("10", 10),
        (30, 30),
        ("verbose", None),
        (None, None),
    ],
)
def test_parse_log_level(value: str | int | None, expected: int | None) -> None:
    """Level names are case-insensitive; numbers pass through."""
    assert parse_log_level(value) == expected


def test_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """``STATEMLOG_LOG_LEVEL`` is honored when set."""
    assert resolve_env_log_level() is None

    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "trace")
    assert resolve_env_log_level() == TRACE_LEVEL


def test_get_logger_supports_trace() -> None:
    """Package loggers expose ``trace()``."""
    logger = get_logger("statemlog.tests")

    assert isinstance(logger, StatemLogger)
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_setup_logging_configures_package_logger_only() -> None:
    """Only the ``statemlog`` logger gets a handler; the root logger is untouched."""
    root_handlers = logging.getLogger().handlers[:]

    setup_logging(logging.DEBUG)

    pkg_logger = logging.getLogger("statemlog")
    assert pkg_logger.level == logging.DEBUG
    assert pkg_logger.propagate is False
    assert len(pkg_logger.handlers) == 1
    assert isinstance(pkg_logger.handlers[0].formatter, ChalkFormatter)
    assert logging.getLogger().handlers == root_handlers


def test_setup_logging_defaults_to_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without an explicit level the environment decides, else CRITICAL."""
    setup_logging()
    assert logging.getLogger("statemlog").level == logging.CRITICAL

    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "INFO")
    setup_logging()
    assert logging.getLogger("statemlog").level == logging.INFO
