# topmark:header:start
#
#   project      : StatemLog
#   file         : test_cli_translate.py
#   file_relpath : tests/cli/test_cli_translate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `translate` command.

Event documents are written to ``tmp_path`` and translated from there, so the
working directory never contributes a configuration file by accident.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from statemlog.cli.exit_codes import ExitCode
from tests.cli.conftest import (
    FORMAT_EVENT_TOML,
    REPORT_EVENT_TOML,
    STRING_EVENT_TOML,
    assert_DATA_ERROR,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli_in,
    write_event,
)
from tests.conftest import mark_cli
from tests.reports import SWITCH_DEBUG_LINES

if TYPE_CHECKING:
    from pathlib import Path

BASE_TEXT: str = "GenStateMachine Switch1 terminating\n** (RuntimeError) oops"


@mark_cli
def test_translate_report_at_default_level(tmp_path: Path) -> None:
    """The default level renders the base message only."""
    write_event(tmp_path, REPORT_EVENT_TOML)

    result = run_cli_in(tmp_path, ["--no-color", "translate", "event.toml"])

    assert_SUCCESS(result)
    assert result.output == BASE_TEXT + "\n"


@mark_cli
def test_translate_report_at_debug_level(tmp_path: Path) -> None:
    """``--level debug`` adds the state and event lines."""
    write_event(tmp_path, REPORT_EVENT_TOML)

    result = run_cli_in(tmp_path, ["--no-color", "translate", "--level", "debug", "event.toml"])

    assert_SUCCESS(result)
    assert result.output == BASE_TEXT + "\n" + SWITCH_DEBUG_LINES + "\n"


@mark_cli
def test_translate_format_event(tmp_path: Path) -> None:
    """Legacy template documents are translated too."""
    write_event(tmp_path, FORMAT_EVENT_TOML)

    result = run_cli_in(tmp_path, ["--no-color", "translate", "event.toml"])

    assert_SUCCESS(result)
    assert result.output == "GenStateMachine Switch1 terminating\n** (exit) shutdown\n"


@mark_cli
def test_translate_json_output(tmp_path: Path) -> None:
    """``--format json`` reports the outcome as a JSON object."""
    write_event(tmp_path, REPORT_EVENT_TOML)

    result = run_cli_in(tmp_path, ["translate", "--format", "json", "--level", "10", "event.toml"])

    assert_SUCCESS(result)
    payload = json.loads(result.output)
    assert payload == {
        "handled": True,
        "level": "DEBUG",
        "message": BASE_TEXT + "\n" + SWITCH_DEBUG_LINES,
    }


@mark_cli
def test_translate_unhandled_event(tmp_path: Path) -> None:
    """Events the translator passes through exit with DATA_ERROR."""
    write_event(tmp_path, STRING_EVENT_TOML)

    result = run_cli_in(tmp_path, ["--no-color", "translate", "event.toml"])

    assert_DATA_ERROR(result)
    assert "not handled" in result.output


@mark_cli
def test_translate_unhandled_event_json(tmp_path: Path) -> None:
    """JSON output is still printed for events that are not handled."""
    write_event(tmp_path, STRING_EVENT_TOML)

    result = run_cli_in(tmp_path, ["translate", "--format", "json", "event.toml"])

    assert_DATA_ERROR(result)
    assert '"handled": false' in result.output


@mark_cli
def test_translate_malformed_report(tmp_path: Path) -> None:
    """A template/argument mismatch is passed through, not an error."""
    write_event(
        tmp_path,
        'kind = "format"\n'
        'template = "** State machine ~p terminating~n** Reason for termination = ~w:~p~n"\n'
        'args = ["Switch1"]\n',
    )

    result = run_cli_in(tmp_path, ["--no-color", "translate", "event.toml"])

    assert_DATA_ERROR(result)


@mark_cli
def test_translate_missing_file(tmp_path: Path) -> None:
    """A missing event file exits with FILE_NOT_FOUND."""
    result = run_cli_in(tmp_path, ["--no-color", "translate", "missing.toml"])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


@mark_cli
def test_translate_invalid_document(tmp_path: Path) -> None:
    """Documents that are not valid TOML or lack a kind exit with DATA_ERROR."""
    write_event(tmp_path, "kind = \n", name="broken.toml")
    write_event(tmp_path, 'text = "no kind"\n', name="nokind.toml")

    assert_DATA_ERROR(run_cli_in(tmp_path, ["--no-color", "translate", "broken.toml"]))
    assert_DATA_ERROR(run_cli_in(tmp_path, ["--no-color", "translate", "nokind.toml"]))


@mark_cli
def test_translate_invalid_level(tmp_path: Path) -> None:
    """Unknown level names are usage errors."""
    write_event(tmp_path, REPORT_EVENT_TOML)

    result = run_cli_in(tmp_path, ["translate", "--level", "loud", "event.toml"])

    assert result.exit_code == 2, result.output
    assert "Invalid level 'loud'" in result.output


@mark_cli
def test_translate_uses_discovered_config(tmp_path: Path) -> None:
    """``statemlog.toml`` in the working directory is picked up."""
    write_event(tmp_path, REPORT_EVENT_TOML)
    (tmp_path / "statemlog.toml").write_text(
        '[translator]\ncomponent_name = "Machine"\n', encoding="utf-8"
    )

    result = run_cli_in(tmp_path, ["--no-color", "translate", "event.toml"])

    assert_SUCCESS(result)
    assert result.output.startswith("Machine Switch1 terminating\n")


@mark_cli
def test_translate_with_explicit_config(tmp_path: Path) -> None:
    """``--config`` names the configuration file; a missing one is FILE_NOT_FOUND."""
    write_event(tmp_path, REPORT_EVENT_TOML)
    (tmp_path / "custom.toml").write_text(
        '[translator]\ncomponent_name = "Custom"\n', encoding="utf-8"
    )

    result = run_cli_in(tmp_path, ["--no-color", "translate", "--config", "custom.toml", "event.toml"])
    assert_SUCCESS(result)
    assert result.output.startswith("Custom Switch1 terminating\n")

    result = run_cli_in(tmp_path, ["--no-color", "translate", "--config", "nope.toml", "event.toml"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


@mark_cli
def test_translate_with_invalid_config(tmp_path: Path) -> None:
    """Configuration values of the wrong type exit with CONFIG_ERROR."""
    write_event(tmp_path, REPORT_EVENT_TOML)
    (tmp_path / "statemlog.toml").write_text("[inspect]\nwidth = 0\n", encoding="utf-8")

    result = run_cli_in(tmp_path, ["--no-color", "translate", "event.toml"])

    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


@mark_cli
def test_verbose_and_quiet_together(tmp_path: Path) -> None:
    """``-v`` and ``-q`` are mutually exclusive."""
    write_event(tmp_path, REPORT_EVENT_TOML)

    assert_USAGE_ERROR(run_cli_in(tmp_path, ["-v", "-q", "translate", "event.toml"]))


@mark_cli
def test_translate_runtime_frame_stack(tmp_path: Path) -> None:
    """Stack entries that are not Python frames are printed one per line."""
    write_event(
        tmp_path,
        'kind = "report"\n\n'
        "[report]\n"
        'label = ["gen_statem", "terminate"]\n'
        'name = "Switch1"\n'
        'reason = ["RuntimeError", "oops", [["switch", "handle_event", 4, []]]]\n',
    )

    result = run_cli_in(tmp_path, ["--no-color", "translate", "event.toml"])

    assert_SUCCESS(result)
    assert result.output == BASE_TEXT + "\n    ['switch', 'handle_event', 4, []]\n"
