# topmark:header:start
#
#   project      : StatemLog
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running StatemLog in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so configuration discovery (``statemlog.toml``,
``pyproject.toml``) and relative event file paths resolve against the
temporary test directory.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Sequence

from click.testing import CliRunner, Result

from statemlog.cli.exit_codes import ExitCode
from statemlog.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path

REPORT_EVENT_TOML: str = """\
kind = "report"

[report]
label = ["gen_statem", "terminate"]
name = "Switch1"
reason = ["RuntimeError", "oops", []]
callback_mode = "handle_event_function"
last_event = ["internal", "error"]
queued = [["internal", "queued"]]
postponed = [["internal", "postpone"]]

[report.state]
state = "off"
data = 0
"""

FORMAT_EVENT_TOML: str = """\
kind = "format"
template = "** State machine ~p terminating~n** Reason for termination = ~w:~p~n"
args = ["Switch1", "exit", "shutdown"]
"""

STRING_EVENT_TOML: str = """\
kind = "string"
text = "Switch1 started"
"""


def run_cli_in(tmp_path: Path, argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD.
        argv (str | Sequence[str] | None): CLI argument vector.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv)
    finally:
        os.chdir(cwd)


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the command does not read configuration or files
    (e.g., ``--help`` or ``version``).
    """
    return CliRunner().invoke(cli, argv)


def write_event(tmp_path: Path, text: str, name: str = "event.toml") -> Path:
    """Write an event document into `tmp_path` and return its path."""
    path: Path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_DATA_ERROR(result: Result) -> None:
    """Assert that the command exited with DATA_ERROR (code 65)."""
    assert result.exit_code == ExitCode.DATA_ERROR, result.output
