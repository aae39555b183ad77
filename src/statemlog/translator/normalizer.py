# topmark:header:start
#
#   project      : StatemLog
#   file         : normalizer.py
#   file_relpath : src/statemlog/translator/normalizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Report normalizer: raw termination report → `CanonicalReport`.

Two raw encodings exist, and which sections they carry depends on the runtime
version and on the optional behaviours active at crash time (state enter
calls, named time-outs, postponed events):

- The legacy encoding (`FormatMessage`) is decoded by pairing the template's
  section headers (see `statemlog.translator.headers`) positionally with the
  argument list.
- The structured encoding (`ReportMessage`) is decoded by key lookup. The
  failure triple is either split over ``class``/``reason``/``stacktrace``
  (older runtimes) or combined in one ``reason`` tuple (newer runtimes).

Both paths raise `MalformedReport` when the event does not decompose as
expected; the caller downgrades that to "not handled".
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final

from statemlog.config.logging import get_logger
from statemlog.errors import MalformedReport
from statemlog.translator.events import FormatMessage, ReportMessage
from statemlog.translator.headers import template_fields

if TYPE_CHECKING:
    from statemlog.config.logging import StatemLogger

logger: StatemLogger = get_logger(__name__)

REQUIRED_FIELDS: Final[tuple[str, ...]] = ("name", "class", "reason")

# Structured keys copied verbatim into the canonical report.
STRUCTURED_OPTIONAL_KEYS: Final[tuple[str, ...]] = (
    "state",
    "callback_mode",
    "state_enter",
    "last_event",
    "queue",
    "queued",
    "postponed",
    "timeouts",
)


class CanonicalReport(Mapping[str, Any]):
    """Immutable, normalized termination report.

    Behaves as a read-only mapping from canonical field name to value. Only the
    fields present in the raw event appear; ``name``, ``class`` and ``reason``
    are always there.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, Any]) -> None:
        missing: list[str] = [key for key in REQUIRED_FIELDS if key not in fields]
        if missing:
            raise MalformedReport(f"Termination report lacks required fields: {missing}")
        self._fields: Mapping[str, Any] = MappingProxyType(dict(fields))

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"CanonicalReport({dict(self._fields)!r})"

    @property
    def name(self) -> Any:
        """Identifier of the terminated process."""
        return self._fields["name"]

    @property
    def failure_class(self) -> Any:
        """Failure classification (exception class, ``"exit"``, ``"throw"``...)."""
        return self._fields["class"]

    @property
    def reason(self) -> Any:
        """Failure payload."""
        return self._fields["reason"]

    @property
    def stack(self) -> Any | None:
        """Captured stack trace, or None when the report carried none."""
        return self._fields.get("stack")


def normalize_legacy(message: FormatMessage) -> CanonicalReport:
    """Decode a legacy template report.

    Args:
        message (FormatMessage): A matched legacy termination report.

    Returns:
        CanonicalReport: The decoded report; ``stack`` is present only when the
            template had a ``Stacktrace`` section.

    Raises:
        MalformedReport: If the template's field slots do not match the argument
            count, or if a section header is repeated.
    """
    names: list[str] = template_fields(message.template)
    if len(names) != len(message.args):
        raise MalformedReport(
            f"Template declares {len(names)} report fields "
            f"but {len(message.args)} arguments were supplied",
            expected=len(names),
            actual=len(message.args),
        )
    repeated: list[str] = sorted({n for n in names if names.count(n) > 1})
    if repeated:
        raise MalformedReport(f"Template repeats report sections: {repeated}")
    logger.trace("Legacy report fields: %s", names)
    return CanonicalReport(dict(zip(names, message.args)))


def normalize_structured(message: ReportMessage) -> CanonicalReport:
    """Decode a structured report mapping.

    Args:
        message (ReportMessage): A matched structured termination report.

    Returns:
        CanonicalReport: The decoded report.

    Raises:
        MalformedReport: If the name or the failure triple cannot be extracted.
    """
    report: Mapping[str, Any] = message.report
    fields: dict[str, Any] = {}

    if "name" not in report:
        raise MalformedReport("Structured termination report has no 'name'")
    fields["name"] = report["name"]

    if "class" in report:
        # Older encoding: class, reason and stacktrace as separate keys
        if "reason" not in report:
            raise MalformedReport("Structured termination report has 'class' but no 'reason'")
        fields["class"] = report["class"]
        fields["reason"] = report["reason"]
        if report.get("stacktrace") is not None:
            fields["stack"] = report["stacktrace"]
    else:
        fields.update(_split_failure(report.get("reason")))

    for key in STRUCTURED_OPTIONAL_KEYS:
        if key in report:
            fields[key] = report[key]

    client_info: Any = report.get("client_info")
    if client_info is not None:
        if not isinstance(client_info, (tuple, list)) or len(client_info) != 2:  # pyright: ignore[reportUnknownArgumentType]
            raise MalformedReport(f"Unexpected 'client_info' shape: {client_info!r}")
        fields["client"], fields["client_stack"] = client_info

    return CanonicalReport(fields)


def _split_failure(failure: Any) -> dict[str, Any]:
    """Unpack a combined ``(class, reason, stacktrace)`` failure triple."""
    if not isinstance(failure, (tuple, list)) or len(failure) != 3:  # pyright: ignore[reportUnknownArgumentType]
        raise MalformedReport(f"Expected a (class, reason, stacktrace) triple, got {failure!r}")
    failure_class, reason, stack = failure  # pyright: ignore[reportUnknownVariableType]
    fields: dict[str, Any] = {"class": failure_class, "reason": reason}
    if stack is not None:
        fields["stack"] = stack
    return fields


def normalize(message: FormatMessage | ReportMessage) -> CanonicalReport:
    """Dispatch a matched raw event to the normalizer for its encoding."""
    match message:
        case FormatMessage():
            return normalize_legacy(message)
        case ReportMessage():
            return normalize_structured(message)
