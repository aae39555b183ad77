# topmark:header:start
#
#   project      : StatemLog
#   file         : translate.py
#   file_relpath : src/statemlog/cli/commands/translate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StatemLog `translate` command.

Reads one diagnostic event from a TOML document, runs it through the
translator and prints the rewritten message. Events the translator does not
handle exit with `ExitCode.DATA_ERROR`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from statemlog.cli.errors import StatemLogDataError, StatemLogFileNotFoundError
from statemlog.cli.event_file import load_event
from statemlog.cli.options import LogLevelParam, OutputFormat, config_file_option
from statemlog.cli.utils import get_console, resolve_config
from statemlog.config.logging import get_logger
from statemlog.errors import EventFileError
from statemlog.translator.translate import translate

if TYPE_CHECKING:
    from statemlog.cli.console import ConsoleLike
    from statemlog.config.logging import StatemLogger
    from statemlog.config.model import Config
    from statemlog.translator.events import TranslateResult

logger: StatemLogger = get_logger(__name__)


@click.command(
    name="translate",
    help="Translate a state machine termination report stored in a TOML document.",
)
@click.argument("event_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--level",
    "min_level",
    type=LogLevelParam(),
    default="info",
    show_default=True,
    help="Minimum log level of the simulated host; 'debug' adds state and event details.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.TEXT.value,
    show_default=True,
    help="Output format.",
)
@config_file_option
def translate_command(
    *,
    event_file: Path,
    min_level: int,
    output_format: str,
    config_path: str | None,
) -> None:
    """Translate one event document and print the result.

    Args:
        event_file (Path): TOML document describing the raw event.
        min_level (int): Minimum log level used to pick the verbosity tier.
        output_format (str): ``text`` or ``json``.
        config_path (str | None): Explicit configuration file.
    """
    console: ConsoleLike = get_console(click.get_current_context())
    config: Config = resolve_config(config_path)

    try:
        kind, payload = load_event(event_file)
    except FileNotFoundError as exc:
        raise StatemLogFileNotFoundError(f"Event file not found: {event_file}") from exc
    except EventFileError as exc:
        raise StatemLogDataError(str(exc)) from exc

    result: TranslateResult = translate(min_level, kind, payload, config=config)
    logger.info("Translated %s at level %s: %s", event_file, min_level, bool(result))

    if OutputFormat(output_format) is OutputFormat.JSON:
        console.print(
            json.dumps(
                {
                    "handled": bool(result),
                    "level": logging.getLevelName(min_level),
                    "message": result.text if result else None,
                }
            )
        )
    elif result:
        console.print(result.text)

    if not result:
        raise StatemLogDataError(f"not handled: {event_file}")
