# topmark:header:start
#
#   project      : StatemLog
#   file         : event_file.py
#   file_relpath : src/statemlog/cli/event_file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read a raw diagnostic event from a TOML document.

Used by ``statemlog translate``. A document names its log kind and carries
the payload for that kind:

    kind = "report"
    [report]
    label = ["gen_statem", "terminate"]
    name = "Switch1"
    reason = ["RuntimeError", "oops", []]
    last_event = ["internal", "error"]

TOML has no tuples: two-element arrays in event-valued fields are turned into
``(type, content)`` tuples so they print like events produced at runtime.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from statemlog.config.keys import EventDoc
from statemlog.config.logging import get_logger
from statemlog.errors import EventFileError
from statemlog.translator.events import FormatMessage, LogKind, ReportMessage
from statemlog.translator.headers import template_fields

if TYPE_CHECKING:
    from pathlib import Path

    from statemlog.config.logging import StatemLogger

logger: StatemLogger = get_logger(__name__)

SINGLE_EVENT_FIELDS: Final[frozenset[str]] = frozenset({"last_event"})
EVENT_LIST_FIELDS: Final[frozenset[str]] = frozenset({"queue", "queued", "postponed"})


def as_event(value: Any) -> Any:
    """Return a two-element list as a ``(type, content)`` tuple."""
    if isinstance(value, list) and len(value) == 2:  # pyright: ignore[reportUnknownArgumentType]
        return tuple(value)  # pyright: ignore[reportUnknownArgumentType]
    return value


def as_field_value(field_name: str, value: Any) -> Any:
    """Convert a document value to the shape the runtime uses for ``field_name``."""
    if field_name in SINGLE_EVENT_FIELDS:
        return as_event(value)
    if field_name in EVENT_LIST_FIELDS and isinstance(value, list):
        return [as_event(item) for item in value]  # pyright: ignore[reportUnknownVariableType]
    return value


def parse_event(data: dict[str, Any]) -> tuple[LogKind | str, object]:
    """Return the ``(kind, payload)`` pair described by a parsed document.

    Args:
        data (dict[str, Any]): Parsed TOML document.

    Returns:
        tuple[LogKind | str, object]: The log kind (unknown kinds are returned
            as plain strings so they reach the translator unchanged) and the payload.

    Raises:
        EventFileError: If the payload for a known kind is missing or mistyped.
    """
    kind_value: Any = data.get(EventDoc.KEY_KIND)
    if not isinstance(kind_value, str):
        raise EventFileError(f"'{EventDoc.KEY_KIND}' must be a string, got {kind_value!r}")
    try:
        kind: LogKind = LogKind(kind_value)
    except ValueError:
        logger.info("Unknown log kind in event document: %r", kind_value)
        return kind_value, data

    if kind is LogKind.FORMAT:
        template: Any = data.get(EventDoc.KEY_TEMPLATE)
        args: Any = data.get(EventDoc.KEY_ARGS, [])
        if not isinstance(template, str) or not isinstance(args, list):
            raise EventFileError(
                f"A '{kind.value}' event needs a string '{EventDoc.KEY_TEMPLATE}' "
                f"and an array '{EventDoc.KEY_ARGS}'"
            )
        names: list[str] = template_fields(template)
        values: list[Any] = cast("list[Any]", args)
        if len(names) == len(values):
            values = [as_field_value(n, v) for n, v in zip(names, values)]
        return kind, FormatMessage(template, tuple(values))

    if kind is LogKind.REPORT:
        report: Any = data.get(EventDoc.SECTION_REPORT)
        if not isinstance(report, dict):
            raise EventFileError(f"A '{kind.value}' event needs a [{EventDoc.SECTION_REPORT}] table")
        table: dict[str, Any] = cast("dict[str, Any]", report)
        return kind, ReportMessage({key: as_field_value(key, v) for key, v in table.items()})

    return kind, data.get(EventDoc.KEY_TEXT, "")


def load_event(path: Path) -> tuple[LogKind | str, object]:
    """Read and parse an event document.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        EventFileError: If the document is not valid TOML or not a valid event.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise
    except OSError as exc:
        raise EventFileError(f"Cannot read {path}: {exc}") from exc
    try:
        data: Any = tomlkit.parse(text).unwrap()
    except TomlkitParseError as exc:
        raise EventFileError(f"Invalid TOML in {path}: {exc}") from exc
    logger.debug("Loaded event document %s", path)
    return parse_event(cast("dict[str, Any]", data))
