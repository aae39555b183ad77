# topmark:header:start
#
#   project      : StatemLog
#   file         : reports.py
#   file_relpath : tests/reports.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sample termination reports shared by the test suite.

Templates mirror the ones the state machine runtime writes; the structured
reports mirror its report mappings. ``SWITCH_*`` values describe one crash
(machine ``Switch1`` raising ``RuntimeError("oops")``) in every encoding so
tests can compare renderings across encodings.
"""

from __future__ import annotations

from typing import Any

from statemlog.translator.events import CallbackMode, FormatMessage, ReportMessage

FULL_TEMPLATE: str = (
    "** State machine ~tp terminating~n"
    "** Last event = ~tp~n"
    "** When server state  = ~tp~n"
    "** Reason for termination = ~tw:~tp~n"
    "** Callback mode = ~p~n"
    "** Queued = ~tp~n"
    "** Postponed = ~tp~n"
    "** Stacktrace =~n**  ~tp~n"
)

NO_STACK_TEMPLATE: str = (
    "** State machine ~p terminating~n"
    "** Last event = ~p~n"
    "** When server state  = ~p~n"
    "** Reason for termination = ~w:~p~n"
    "** Callback mode = ~p~n"
    "** Queued = ~p~n"
    "** Postponed = ~p~n"
)

CLIENT_TEMPLATE: str = (
    "** State machine ~tp terminating~n"
    "** When server state  = ~tp~n"
    "** Reason for termination = ~tw:~tp~n"
    "** Callback mode = ~p~n"
    "** Time-outs: ~tp~n"
    "** Client ~tp stacktrace~n"
    "** ~tp~n"
)

SWITCH_STATE: dict[str, Any] = {"state": "off", "data": 0}
SWITCH_LAST_EVENT: tuple[str, str] = ("internal", "error")
SWITCH_QUEUED: list[tuple[str, str]] = [("internal", "queued")]
SWITCH_POSTPONED: list[tuple[str, str]] = [("internal", "postpone")]


def switch_legacy(*, stack: Any = None) -> FormatMessage:
    """Return the ``Switch1`` crash in the legacy encoding.

    With ``stack`` the full template (with a Stacktrace section) is used.
    """
    args: list[Any] = [
        "Switch1",
        SWITCH_LAST_EVENT,
        SWITCH_STATE,
        RuntimeError,
        "oops",
        CallbackMode.HANDLE_EVENT_FUNCTION,
        SWITCH_QUEUED,
        SWITCH_POSTPONED,
    ]
    if stack is None:
        return FormatMessage(NO_STACK_TEMPLATE, tuple(args))
    return FormatMessage(FULL_TEMPLATE, (*args, stack))


def switch_report(**overrides: Any) -> dict[str, Any]:
    """Return the ``Switch1`` crash as a structured report mapping."""
    report: dict[str, Any] = {
        "label": ("gen_statem", "terminate"),
        "name": "Switch1",
        "reason": (RuntimeError, "oops", []),
        "state": SWITCH_STATE,
        "callback_mode": CallbackMode.HANDLE_EVENT_FUNCTION,
        "last_event": SWITCH_LAST_EVENT,
        "queued": SWITCH_QUEUED,
        "postponed": SWITCH_POSTPONED,
    }
    report.update(overrides)
    return report


def switch_structured(**overrides: Any) -> ReportMessage:
    """Return the ``Switch1`` crash in the structured encoding."""
    return ReportMessage(switch_report(**overrides))


SWITCH_DEBUG_LINES: str = (
    "Callback mode: handle_event_function\n"
    "Last event: ('internal', 'error')\n"
    "Postponed events: [('internal', 'postpone')]\n"
    "Queued events: [('internal', 'queued')]\n"
    "State: {'data': 0, 'state': 'off'}"
)
