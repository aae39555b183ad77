# topmark:header:start
#
#   project      : StatemLog
#   file         : constants.py
#   file_relpath : src/statemlog/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StatemLog Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

STATEMLOG_VERSION: str = get_version("statemlog")

# Config file names probed in the working directory (first match wins):
STATEMLOG_TOML_NAME: Final[str] = "statemlog.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "tool.statemlog"

# Environment variable consulted for StatemLog's own log level:
LOG_LEVEL_ENV_VAR: Final[str] = "STATEMLOG_LOG_LEVEL"

DEFAULT_COMPONENT_NAME: Final[str] = "GenStateMachine"

# Leading literal text of a termination report template. The wide variant only
# differs in the format directive used for the machine name.
TERMINATING_HEADER: Final[str] = "** State machine ~p terminating~n"
TERMINATING_HEADER_WIDE: Final[str] = "** State machine ~tp terminating~n"

# Label carried by structured termination reports.
TERMINATE_REPORT_LABEL: Final[tuple[str, str]] = ("gen_statem", "terminate")
