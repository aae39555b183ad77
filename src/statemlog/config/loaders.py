# topmark:header:start
#
#   project      : StatemLog
#   file         : loaders.py
#   file_relpath : src/statemlog/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render TOML configuration sources.

This module reads StatemLog configuration from on-disk TOML files
(``statemlog.toml`` or ``[tool.statemlog]`` in ``pyproject.toml``) and renders
a `Config` back to TOML for ``statemlog config``.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from statemlog.config.logging import get_logger
from statemlog.config.model import Config
from statemlog.constants import (
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
    STATEMLOG_TOML_NAME,
)

if TYPE_CHECKING:
    from statemlog.config.logging import StatemLogger

TomlTable = dict[str, Any]

logger: StatemLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``statemlog.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
    except (TypeError, ValueError) as e:
        logger.error("Unknown error while reading TOML from %s: %s", path, e)
        return {}


def extract_statemlog_table(path: Path, data: TomlTable) -> TomlTable:
    """Return the StatemLog table from a parsed document.

    ``pyproject.toml`` nests the configuration under ``[tool.statemlog]``;
    any other file is taken as-is.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    node: Any = data
    for part in PYPROJECT_TOOL_SECTION.split("."):
        if not isinstance(node, dict) or part not in node:
            logger.debug("No [%s] table in %s", PYPROJECT_TOOL_SECTION, path)
            return {}
        node = cast("TomlTable", node)[part]
    return cast("TomlTable", node) if isinstance(node, dict) else {}


def discover_config_path(start: Path | None = None) -> Path | None:
    """Return the first configuration file found in ``start`` (default: CWD).

    ``statemlog.toml`` takes precedence over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it has a ``[tool.statemlog]`` table.
    """
    root: Path = start or Path.cwd()
    candidate: Path = root / STATEMLOG_TOML_NAME
    if candidate.is_file():
        return candidate
    candidate = root / PYPROJECT_TOML_NAME
    if candidate.is_file() and extract_statemlog_table(candidate, load_toml_dict(candidate)):
        return candidate
    return None


def load_config(path: Path | None = None, *, discover: bool = True) -> Config:
    """Return a `Config` layered from runtime defaults and one TOML file.

    Args:
        path: Explicit configuration file. When ``None`` and ``discover`` is
            true, the working directory is probed via `discover_config_path`.
        discover: Whether to probe the working directory when ``path`` is None.

    Returns:
        The frozen configuration.

    Raises:
        ConfigError: If the file carries values of the wrong type.
    """
    if path is None and discover:
        path = discover_config_path()
    if path is None:
        logger.debug("No configuration file; using runtime defaults")
        return Config.from_defaults()

    logger.info("Loading configuration from %s", path)
    table: TomlTable = extract_statemlog_table(path, load_toml_dict(path))
    return Config.from_dict(table)


def to_toml(config: Config) -> str:
    """Serialize a configuration to a TOML document string."""
    return cast("str", cast("Any", tomlkit).dumps(config.to_dict()))
