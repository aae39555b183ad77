# topmark:header:start
#
#   project      : StatemLog
#   file         : model.py
#   file_relpath : src/statemlog/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable configuration model for StatemLog.

`Config` is a frozen snapshot: it is built once (from runtime defaults, a TOML
table, or both) and then only read. The translator consumes exactly two
things from it: the component name printed in the message header, and the
`InspectOptions` used to pretty-print embedded values.

Sections:
    * InspectOptions: ``pprint`` options for states, events and reasons.
    * Config: the top-level snapshot with TOML (de)serialization helpers.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from statemlog.config.keys import Toml
from statemlog.config.logging import get_logger
from statemlog.constants import DEFAULT_COMPONENT_NAME
from statemlog.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from statemlog.config.logging import StatemLogger

logger: StatemLogger = get_logger(__name__)


@dataclass(frozen=True)
class InspectOptions:
    """Pretty-printing options applied to embedded values.

    Attributes:
        width (int): Desired maximum line width.
        depth (int | None): Maximum nesting depth; ``None`` means unlimited.
        compact (bool): Pack sequence items on as few lines as possible.
        sort_dicts (bool): Sort mapping keys in the output.
    """

    width: int = 80
    depth: int | None = None
    compact: bool = False
    sort_dicts: bool = True

    def as_pformat_kwargs(self) -> dict[str, Any]:
        """Return keyword arguments suitable for `pprint.pformat`."""
        return {
            "width": self.width,
            "depth": self.depth,
            "compact": self.compact,
            "sort_dicts": self.sort_dicts,
        }


@dataclass(frozen=True)
class Config:
    """Frozen StatemLog configuration snapshot.

    Attributes:
        component_name (str): Name printed before the machine name in the header line.
        inspect (InspectOptions): Formatting options for embedded values.
    """

    component_name: str = DEFAULT_COMPONENT_NAME
    inspect: InspectOptions = field(default_factory=InspectOptions)

    @classmethod
    def from_defaults(cls) -> Config:
        """Return a configuration holding the runtime defaults."""
        return cls()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, base: Config | None = None) -> Config:
        """Build a configuration from a TOML table, layered over ``base``.

        Unknown sections and keys are ignored (and logged); keys that are present
        override the corresponding value of ``base``.

        Args:
            data: Parsed TOML table (``statemlog.toml`` or ``[tool.statemlog]``).
            base: Configuration to layer over. Defaults to the runtime defaults.

        Returns:
            A new frozen `Config`.

        Raises:
            ConfigError: If a known key carries a value of the wrong type.
        """
        cfg: Config = base or cls.from_defaults()

        translator: Mapping[str, Any] = _section(data, Toml.SECTION_TRANSLATOR)
        if Toml.KEY_COMPONENT_NAME in translator:
            name = translator[Toml.KEY_COMPONENT_NAME]
            if not isinstance(name, str) or not name:
                raise ConfigError(
                    f"[{Toml.SECTION_TRANSLATOR}] {Toml.KEY_COMPONENT_NAME} "
                    f"must be a non-empty string, got {name!r}"
                )
            cfg = replace(cfg, component_name=name)

        inspect_tbl: Mapping[str, Any] = _section(data, Toml.SECTION_INSPECT)
        opts: InspectOptions = cfg.inspect
        if Toml.KEY_WIDTH in inspect_tbl:
            opts = replace(opts, width=_positive_int(Toml.KEY_WIDTH, inspect_tbl[Toml.KEY_WIDTH]))
        if Toml.KEY_DEPTH in inspect_tbl:
            depth: int = _non_negative_int(Toml.KEY_DEPTH, inspect_tbl[Toml.KEY_DEPTH])
            # TOML has no null; 0 stands for "unlimited"
            opts = replace(opts, depth=depth or None)
        if Toml.KEY_COMPACT in inspect_tbl:
            opts = replace(opts, compact=_bool(Toml.KEY_COMPACT, inspect_tbl[Toml.KEY_COMPACT]))
        if Toml.KEY_SORT_DICTS in inspect_tbl:
            opts = replace(
                opts, sort_dicts=_bool(Toml.KEY_SORT_DICTS, inspect_tbl[Toml.KEY_SORT_DICTS])
            )

        for key in data:
            if key not in (Toml.SECTION_TRANSLATOR, Toml.SECTION_INSPECT):
                logger.warning("Ignoring unknown configuration section: [%s]", key)

        return replace(cfg, inspect=opts)

    def to_dict(self) -> dict[str, Any]:
        """Return a TOML-compatible table describing this configuration."""
        return {
            Toml.SECTION_TRANSLATOR: {
                Toml.KEY_COMPONENT_NAME: self.component_name,
            },
            Toml.SECTION_INSPECT: {
                Toml.KEY_WIDTH: self.inspect.width,
                Toml.KEY_DEPTH: self.inspect.depth or 0,
                Toml.KEY_COMPACT: self.inspect.compact,
                Toml.KEY_SORT_DICTS: self.inspect.sort_dicts,
            },
        }


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value: Any = data.get(name, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{name}] must be a table, got {type(value).__name__}")
    return value  # type: ignore[return-value]


def _bool(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"[{Toml.SECTION_INSPECT}] {key} must be a boolean, got {value!r}")
    return value


def _non_negative_int(key: str, value: Any) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(
            f"[{Toml.SECTION_INSPECT}] {key} must be a non-negative integer, got {value!r}"
        )
    return value


def _positive_int(key: str, value: Any) -> int:
    if _non_negative_int(key, value) == 0:
        raise ConfigError(f"[{Toml.SECTION_INSPECT}] {key} must be positive, got {value!r}")
    return value
