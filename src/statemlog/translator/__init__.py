# topmark:header:start
#
#   project      : StatemLog
#   file         : __init__.py
#   file_relpath : src/statemlog/translator/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic translator for state machine termination reports.

Pipeline stages:
    * `statemlog.translator.filter`: recognizes termination reports.
    * `statemlog.translator.normalizer`: decodes them into a `CanonicalReport`.
    * `statemlog.translator.renderer`: formats the report for a verbosity tier.

`translate` composes the three; `install_translator` hooks it into `logging`.
"""

from __future__ import annotations

from statemlog.translator.events import (
    NOT_HANDLED,
    CallbackMode,
    FormatMessage,
    Handled,
    LogKind,
    NotHandled,
    ReportMessage,
)
from statemlog.translator.hook import install_translator, translate_record
from statemlog.translator.normalizer import CanonicalReport, normalize
from statemlog.translator.translate import translate

__all__ = [
    "NOT_HANDLED",
    "CallbackMode",
    "CanonicalReport",
    "FormatMessage",
    "Handled",
    "LogKind",
    "NotHandled",
    "ReportMessage",
    "install_translator",
    "normalize",
    "translate",
    "translate_record",
]
