# topmark:header:start
#
#   project      : StatemLog
#   file         : translate.py
#   file_relpath : src/statemlog/translator/translate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Translator entry point: filter → normalize → render.

`translate` is a pure, synchronous transform from one raw diagnostic event to
`Handled` or `NOT_HANDLED`. It holds no state between calls and is safe to
call concurrently. A `MalformedReport` raised while normalizing is caught here
and downgraded to `NOT_HANDLED`, so the host always receives a clean
pass-through signal and emits the original event.

Typical usage:

    result = translate(logging.INFO, LogKind.REPORT, ReportMessage(report))
    if result:
        emit(result.text)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from statemlog.config.logging import get_logger
from statemlog.config.runtime import get_config
from statemlog.errors import MalformedReport
from statemlog.translator.events import NOT_HANDLED, Handled
from statemlog.translator.filter import Route, classify
from statemlog.translator.normalizer import normalize
from statemlog.translator.renderer import render

if TYPE_CHECKING:
    from statemlog.config.logging import StatemLogger
    from statemlog.config.model import Config
    from statemlog.translator.events import RawEvent, TranslateResult
    from statemlog.translator.normalizer import CanonicalReport

logger: StatemLogger = get_logger(__name__)


def translate(
    min_level: int,
    kind: object,
    payload: object,
    *,
    config: Config | None = None,
) -> TranslateResult:
    """Translate one raw diagnostic event.

    Args:
        min_level (int): The host's configured minimum log level; ``DEBUG`` or
            lower selects the extended rendering.
        kind (object): Log kind (`LogKind`) of the payload.
        payload (object): The raw event (`FormatMessage` or `ReportMessage`).
        config (Config | None): Configuration to use; defaults to the
            process-wide configuration.

    Returns:
        TranslateResult: `Handled` with the message fragments, or `NOT_HANDLED`.
    """
    route: Route | None = classify(kind, payload)
    if route is None:
        return NOT_HANDLED

    logger.trace("Matched %s termination report", route.value)
    try:
        report: CanonicalReport = normalize(cast("RawEvent", payload))
    except MalformedReport as exc:
        logger.debug("Termination report left untranslated: %s", exc)
        return NOT_HANDLED

    cfg: Config = config or get_config()
    fragments = render(
        report,
        min_level,
        component_name=cfg.component_name,
        options=cfg.inspect,
    )
    return Handled(tuple(fragments))
