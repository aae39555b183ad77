# topmark:header:start
#
#   project      : StatemLog
#   file         : __init__.py
#   file_relpath : src/statemlog/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StatemLog configuration: model, TOML loaders and process-wide options."""

from __future__ import annotations

from statemlog.config.loaders import load_config, to_toml
from statemlog.config.model import Config, InspectOptions
from statemlog.config.runtime import configure, get_config

__all__ = [
    "Config",
    "InspectOptions",
    "configure",
    "get_config",
    "load_config",
    "to_toml",
]
