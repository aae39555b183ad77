# topmark:header:start
#
#   project      : StatemLog
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the StatemLog test suite.

Global fixtures keep process-wide state from leaking between tests:

- the ``STATEMLOG_LOG_LEVEL`` environment variable,
- the ``statemlog`` package logger (the CLI reconfigures it),
- the process-wide configuration (`statemlog.config.runtime`),
- the `LogRecord` factory and the translator's install guard.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any, TypeVar, cast

import pytest

from statemlog.config import runtime
from statemlog.constants import LOG_LEVEL_ENV_VAR
from statemlog.translator import hook

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


@pytest.fixture(autouse=True)
def silence_statemlog_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep the environment and the ``statemlog`` logger as they were before the test.

    The CLI calls `setup_logging`, which replaces the package logger's handlers
    and stops propagation; restoring it keeps `caplog` usable in later tests.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    pkg_logger = logging.getLogger("statemlog")
    saved_level: int = pkg_logger.level
    saved_propagate: bool = pkg_logger.propagate
    saved_handlers: list[logging.Handler] = pkg_logger.handlers[:]
    yield
    pkg_logger.setLevel(saved_level)
    pkg_logger.propagate = saved_propagate
    pkg_logger.handlers[:] = saved_handlers


@pytest.fixture(autouse=True)
def reset_runtime_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without a process-wide configuration."""
    monkeypatch.setattr(runtime, "_config", None)


@pytest.fixture
def fresh_hook(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Allow `install_translator` to run again and undo its record factory afterwards."""
    original: Callable[..., logging.LogRecord] = logging.getLogRecordFactory()
    monkeypatch.setattr(hook, "_installed", None)
    yield
    logging.setLogRecordFactory(original)
