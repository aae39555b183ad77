# topmark:header:start
#
#   project      : StatemLog
#   file         : renderer.py
#   file_relpath : src/statemlog/translator/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Report renderer: `CanonicalReport` → message fragments.

Two verbosity tiers:

- Base (always)::

      GenStateMachine Switch1 terminating
      ** (RuntimeError) oops
            File "switch.py", line 12, in handle_event

- Extended (minimum level at DEBUG or below): one extra line per present
  optional field, ordered by canonical field name so that reports decoded
  from either raw encoding render identically.

The renderer returns fragments and never writes to a sink.
"""

from __future__ import annotations

import logging
import traceback
from enum import Enum
from pprint import pformat
from types import TracebackType
from typing import TYPE_CHECKING, Any, Final

from statemlog.config.model import InspectOptions

if TYPE_CHECKING:
    from collections.abc import Sequence

    from statemlog.translator.normalizer import CanonicalReport

FRAME_INDENT: Final[str] = "    "

# Labels of the extended tier, keyed by canonical field name.
FIELD_LABELS: Final[dict[str, str]] = {
    "callback_mode": "Callback mode",
    "client": "Client",
    "client_stack": "Client stacktrace",
    "last_event": "Last event",
    "postponed": "Postponed events",
    "queued": "Queued events",
    "state": "State",
    "state_enter": "State enter",
    "timeouts": "Timeouts",
}

# Fields holding a stack trace rather than a value.
STACK_FIELDS: Final[frozenset[str]] = frozenset({"client_stack"})


def is_extended(min_level: int) -> bool:
    """Return True if ``min_level`` selects the extended (debug) tier."""
    return min_level <= logging.DEBUG


def inspect_value(value: Any, options: InspectOptions) -> str:
    """Pretty-print an embedded value with the configured options."""
    if isinstance(value, Enum):
        return str(value.value)
    return pformat(value, **options.as_pformat_kwargs())


def format_name(name: Any, options: InspectOptions) -> str:
    """Return the process name as printed in the header line."""
    return name if isinstance(name, str) else inspect_value(name, options)


def _failure_label(kind: Any, reason: Any) -> str:
    if isinstance(kind, type) and issubclass(kind, BaseException):
        return kind.__name__
    if isinstance(reason, BaseException) and kind in ("error", None):
        return type(reason).__name__
    if isinstance(kind, Enum):
        return str(kind.value)
    return str(kind)


def _failure_message(reason: Any, options: InspectOptions) -> str:
    if isinstance(reason, BaseException):
        return str(reason)
    if isinstance(reason, str):
        return reason
    return inspect_value(reason, options)


def _frame_summaries(stack: Any) -> list[traceback.FrameSummary] | None:
    """Return frames for a structured stack, or None for preformatted lines."""
    if isinstance(stack, TracebackType):
        return list(traceback.extract_tb(stack))
    frames: list[traceback.FrameSummary] = []
    for entry in stack:
        if isinstance(entry, traceback.FrameSummary):
            frames.append(entry)
        elif isinstance(entry, (tuple, list)) and len(entry) in (3, 4):  # pyright: ignore[reportUnknownArgumentType]
            filename, lineno, name, *rest = entry  # pyright: ignore[reportUnknownVariableType]
            if isinstance(lineno, bool) or not isinstance(lineno, int):
                return None
            frames.append(
                traceback.FrameSummary(
                    str(filename),  # pyright: ignore[reportUnknownArgumentType]
                    int(lineno),  # pyright: ignore[reportUnknownArgumentType]
                    str(name),  # pyright: ignore[reportUnknownArgumentType]
                    line=str(rest[0]) if rest else None,  # pyright: ignore[reportUnknownArgumentType]
                )
            )
        else:
            return None
    return frames


def format_stack(stack: Any) -> list[str]:
    """Return indented stack-frame lines; an absent stack yields no lines.

    Structured frames go through `traceback.format_list` so they read like any
    other traceback in the log; anything else is printed one entry per line.
    """
    if stack is None:
        return []
    if isinstance(stack, str):
        return [FRAME_INDENT + line for line in stack.splitlines() if line.strip()]
    if not isinstance(stack, (list, tuple, TracebackType)):
        return [FRAME_INDENT + str(stack)]
    frames: list[traceback.FrameSummary] | None = _frame_summaries(stack)
    if frames is None:
        return [FRAME_INDENT + str(entry).rstrip("\n") for entry in stack]
    lines: list[str] = []
    for chunk in traceback.format_list(frames):
        lines.extend(FRAME_INDENT + line for line in chunk.splitlines())
    return lines


def format_failure(
    kind: Any,
    reason: Any,
    stack: Any = None,
    options: InspectOptions | None = None,
) -> str:
    """Format a failure as ``** (<class>) <reason>`` followed by its stack frames.

    Args:
        kind (Any): Failure class: an exception type, an enum, or a string such
            as ``"exit"``, ``"throw"`` or an exception class name.
        reason (Any): Failure payload; exceptions print their message.
        stack (Any): Stack trace, or None.
        options (InspectOptions | None): Formatting options for non-string reasons.

    Returns:
        str: The formatted failure, without a trailing newline.
    """
    opts: InspectOptions = options or InspectOptions()
    lines: list[str] = [f"** ({_failure_label(kind, reason)}) {_failure_message(reason, opts)}"]
    lines.extend(format_stack(stack))
    return "\n".join(lines).rstrip("\n")


def format_callback_mode(mode: Any, state_enter: bool = False) -> str:
    """Return the callback mode as printed on the Callback mode line."""
    if isinstance(mode, (tuple, list)):
        parts: list[str] = [format_callback_mode(item) for item in mode]  # pyright: ignore[reportUnknownVariableType]
    else:
        parts = [str(mode.value) if isinstance(mode, Enum) else str(mode)]
    if state_enter and "state_enter" not in parts:
        parts.append("state_enter")
    return ", ".join(parts)


def render_base(report: CanonicalReport, component_name: str, options: InspectOptions) -> list[str]:
    """Return the fragments of the base rendering."""
    return [
        f"{component_name} {format_name(report.name, options)} terminating",
        "\n",
        format_failure(report.failure_class, report.reason, report.stack, options),
    ]


def extended_fields(report: CanonicalReport) -> list[tuple[str, Any]]:
    """Return the present optional fields, sorted by canonical field name.

    A combined ``queue`` (head: last event, tail: queued events) is split into
    ``last_event`` and ``queued`` unless those fields are present themselves.
    ``state_enter`` gets a line of its own only when there is no callback mode.
    """
    fields: dict[str, Any] = {
        key: report[key] for key in FIELD_LABELS if key in report and key != "state_enter"
    }
    queue: Any = report.get("queue")
    if isinstance(queue, (tuple, list)) and queue:
        head, *tail = queue  # pyright: ignore[reportUnknownVariableType]
        fields.setdefault("last_event", head)
        fields.setdefault("queued", tail)
    # state_enter is folded into the callback mode line when there is one
    if report.get("state_enter") and "callback_mode" not in fields:
        fields["state_enter"] = True
    return sorted(fields.items())


def render_extended(report: CanonicalReport, options: InspectOptions) -> list[str]:
    """Return the fragments of the extended tier (one line per present field)."""
    state_enter: bool = bool(report.get("state_enter", False))
    fragments: list[str] = []
    for key, value in extended_fields(report):
        label: str = FIELD_LABELS[key]
        if key in STACK_FIELDS:
            fragments.append(f"\n{label}:")
            fragments.extend("\n" + line for line in format_stack(value))
        elif key == "callback_mode":
            fragments.append(f"\n{label}: {format_callback_mode(value, state_enter)}")
        else:
            fragments.append(f"\n{label}: {inspect_value(value, options)}")
    return fragments


def render(
    report: CanonicalReport,
    min_level: int,
    *,
    component_name: str,
    options: InspectOptions,
) -> Sequence[str]:
    """Render a canonical report for the given minimum log level.

    Args:
        report (CanonicalReport): The normalized report.
        min_level (int): The host's configured minimum log level.
        component_name (str): Name printed at the start of the header line.
        options (InspectOptions): Formatting options for embedded values.

    Returns:
        Sequence[str]: Ordered fragments, safe to concatenate.
    """
    fragments: list[str] = render_base(report, component_name, options)
    if is_extended(min_level):
        fragments.extend(render_extended(report, options))
    return fragments
