# topmark:header:start
#
#   project      : StatemLog
#   file         : hook.py
#   file_relpath : src/statemlog/translator/hook.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registration of the translator with the standard `logging` package.

`install_translator` wraps the process-wide `LogRecord` factory once, at host
startup. Every record at ``ERROR`` or above is offered to the translator; when
it is handled the record's message is replaced by the rendered text,
otherwise the record is delivered exactly as it was created. There is no
uninstall: the registration lives as long as the process.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from threading import Lock
from typing import TYPE_CHECKING, Any

from statemlog.config.logging import get_logger
from statemlog.config.runtime import configure
from statemlog.translator.events import FormatMessage, LogKind, ReportMessage
from statemlog.translator.translate import translate

if TYPE_CHECKING:
    from collections.abc import Callable

    from statemlog.config.logging import StatemLogger
    from statemlog.config.model import Config
    from statemlog.translator.events import TranslateResult

logger: StatemLogger = get_logger(__name__)

_install_lock = Lock()
_installed: TranslatingRecordFactory | None = None


def record_event(record: logging.LogRecord) -> tuple[LogKind, object]:
    """Return the ``(kind, payload)`` pair the translator sees for a record.

    A mapping message is a structured report; a string message with positional
    arguments is a format template; anything else is a plain string event.
    """
    if isinstance(record.msg, Mapping):
        return LogKind.REPORT, ReportMessage(record.msg)  # pyright: ignore[reportUnknownArgumentType]
    if isinstance(record.msg, str) and isinstance(record.args, tuple):
        return LogKind.FORMAT, FormatMessage(record.msg, record.args)
    return LogKind.STRING, record.msg


def translate_record(record: logging.LogRecord, min_level: int | None = None) -> bool:
    """Rewrite ``record`` in place when it carries a termination report.

    Args:
        record (logging.LogRecord): The record to offer to the translator.
        min_level (int | None): Minimum level deciding the verbosity tier;
            defaults to the effective level of the emitting logger.

    Returns:
        bool: True if the record was rewritten.
    """
    if record.levelno < logging.ERROR:
        return False
    if min_level is None:
        min_level = logging.getLogger(record.name).getEffectiveLevel()

    kind, payload = record_event(record)
    result: TranslateResult = translate(min_level, kind, payload)
    if not result:
        return False
    record.msg = result.text
    record.args = ()
    return True


class TranslatingRecordFactory:
    """`LogRecord` factory offering each new record to the translator.

    Attributes:
        base (Callable[..., logging.LogRecord]): The factory that was in place
            when the translator was installed.
    """

    def __init__(self, base: Callable[..., logging.LogRecord]) -> None:
        self.base = base

    def __call__(self, *args: Any, **kwargs: Any) -> logging.LogRecord:
        record: logging.LogRecord = self.base(*args, **kwargs)
        try:
            translate_record(record)
        except Exception as exc:
            # A translator defect must not block delivery of the original record.
            record.translation_error = exc
        return record


def install_translator(config: Config | None = None) -> bool:
    """Register the translator with the logging subsystem (once per process).

    Args:
        config (Config | None): Configuration to install process-wide before
            registering; when omitted the defaults are loaded on first use.

    Returns:
        bool: True if this call installed the translator, False if it was
            already installed.
    """
    global _installed
    with _install_lock:
        if _installed is not None:
            logger.debug("Translator already installed")
            return False
        if config is not None:
            configure(config)
        _installed = TranslatingRecordFactory(logging.getLogRecordFactory())
        logging.setLogRecordFactory(_installed)
        logger.debug("Translator installed")
        return True
