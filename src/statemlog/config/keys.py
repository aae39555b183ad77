# topmark:header:start
#
#   project      : StatemLog
#   file         : keys.py
#   file_relpath : src/statemlog/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for StatemLog configuration.

These constants are the external configuration API as it appears in
``statemlog.toml`` and in ``[tool.statemlog]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by StatemLog configuration.

    The ordering of constants mirrors the rendered defaults (`statemlog config`).
    """

    # [translator]
    SECTION_TRANSLATOR: Final[str] = "translator"

    KEY_COMPONENT_NAME: Final[str] = "component_name"

    # [inspect]: formatting options for embedded values (state, events)
    SECTION_INSPECT: Final[str] = "inspect"

    KEY_WIDTH: Final[str] = "width"
    KEY_DEPTH: Final[str] = "depth"
    KEY_COMPACT: Final[str] = "compact"
    KEY_SORT_DICTS: Final[str] = "sort_dicts"


class EventDoc:
    """Keys of the TOML event documents read by ``statemlog translate``."""

    KEY_KIND: Final[str] = "kind"

    # kind = "format"
    KEY_TEMPLATE: Final[str] = "template"
    KEY_ARGS: Final[str] = "args"

    # kind = "report"
    SECTION_REPORT: Final[str] = "report"

    # kind = "string"
    KEY_TEXT: Final[str] = "text"
