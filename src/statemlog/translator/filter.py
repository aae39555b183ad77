# topmark:header:start
#
#   project      : StatemLog
#   file         : filter.py
#   file_relpath : src/statemlog/translator/filter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Event filter: decide whether a raw event is a termination report.

`classify` is pure: it never logs, never formats and never raises. It returns
a `Route` naming the normalizer for a matched event, or ``None`` to signal
"not handled". Kinds outside `LogKind.FORMAT`/`LogKind.REPORT` are rejected
before the payload is looked at.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from statemlog.constants import (
    TERMINATE_REPORT_LABEL,
    TERMINATING_HEADER,
    TERMINATING_HEADER_WIDE,
)
from statemlog.translator.events import FormatMessage, LogKind, ReportMessage

TERMINATING_HEADERS: tuple[str, ...] = (TERMINATING_HEADER, TERMINATING_HEADER_WIDE)


class Route(Enum):
    """Which raw-shape normalizer applies to a matched event."""

    LEGACY = "legacy"
    STRUCTURED = "structured"


def is_terminate_label(label: Any) -> bool:
    """Return True if ``label`` equals the termination report sentinel.

    Lists are accepted as well as tuples: documents loaded from TOML or JSON
    have no tuple type.
    """
    if not isinstance(label, (tuple, list)):
        return False
    return tuple(label) == TERMINATE_REPORT_LABEL  # pyright: ignore[reportUnknownArgumentType]


def classify(kind: object, payload: object) -> Route | None:
    """Return the route for a termination report, or None when not handled.

    Args:
        kind (object): Log kind delivered by the host; only `LogKind.FORMAT`
            and `LogKind.REPORT` can match.
        payload (object): The raw event.

    Returns:
        Route | None: The normalizer route, or ``None`` for pass-through.
    """
    if kind == LogKind.FORMAT:
        if isinstance(payload, FormatMessage) and payload.template.startswith(
            TERMINATING_HEADERS
        ):
            return Route.LEGACY
        return None
    if kind == LogKind.REPORT:
        if isinstance(payload, ReportMessage) and is_terminate_label(payload.report.get("label")):
            return Route.STRUCTURED
        return None
    return None
