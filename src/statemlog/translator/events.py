# topmark:header:start
#
#   project      : StatemLog
#   file         : events.py
#   file_relpath : src/statemlog/translator/events.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Raw diagnostic events and translation results.

A raw event is a tagged variant with two constructors:

- `FormatMessage`: the legacy encoding, a format template plus positional
  arguments.
- `ReportMessage`: the structured encoding, a labelled mapping.

The translator answers with either `Handled` (the rewritten message as text
fragments) or the falsy `NOT_HANDLED` singleton.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Final, Union

if TYPE_CHECKING:
    from collections.abc import Mapping


class LogKind(str, Enum):
    """Categories of log payloads delivered by the host logging subsystem."""

    FORMAT = "format"
    REPORT = "report"
    STRING = "string"


class CallbackMode(str, Enum):
    """Dispatch convention of the terminated state machine."""

    STATE_FUNCTIONS = "state_functions"
    HANDLE_EVENT_FUNCTION = "handle_event_function"


@dataclass(frozen=True)
class FormatMessage:
    """Legacy form: a format template and its positional arguments.

    Attributes:
        template (str): Literal text interleaved with ``~p``-style placeholders.
        args (tuple[Any, ...]): One argument per placeholder, in order.
    """

    template: str
    args: tuple[Any, ...] = ()


@dataclass(frozen=True)
class ReportMessage:
    """Structured form: a mapping of field names to values, with a ``label`` key."""

    report: Mapping[str, Any] = field(default_factory=lambda: {})


RawEvent = Union[FormatMessage, ReportMessage]


@dataclass(frozen=True)
class Handled:
    """A successful translation.

    Attributes:
        fragments (tuple[str, ...]): Ordered text fragments; concatenating them
            yields the message.
    """

    fragments: tuple[str, ...]

    @property
    def text(self) -> str:
        """Return the concatenated message text."""
        return "".join(self.fragments)


@dataclass(frozen=True)
class NotHandled:
    """Pass-through signal: the host emits the original event unchanged."""

    def __bool__(self) -> bool:
        return False


NOT_HANDLED: Final[NotHandled] = NotHandled()

TranslateResult = Union[Handled, NotHandled]
