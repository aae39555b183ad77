# topmark:header:start
#
#   project      : StatemLog
#   file         : __init__.py
#   file_relpath : src/statemlog/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StatemLog package.

StatemLog translates the abnormal-termination reports emitted by a supervised
state machine runtime into short, human-readable log messages. The translator
is a pure transform hooked into the standard `logging` package; anything it
does not recognize is passed through unchanged.
"""

from __future__ import annotations

from statemlog.translator import (
    NOT_HANDLED,
    Handled,
    install_translator,
    translate,
    translate_record,
)

__all__ = [
    "NOT_HANDLED",
    "Handled",
    "install_translator",
    "translate",
    "translate_record",
]
