# topmark:header:start
#
#   project      : StatemLog
#   file         : runtime.py
#   file_relpath : src/statemlog/config/runtime.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Process-wide configuration used at translation time.

The host sets the configuration once during startup (`configure`); the
translator reads it with `get_config`, which falls back to the runtime
defaults on first use. `Config` is frozen, so readers share one snapshot
without locking.
"""

from __future__ import annotations

from statemlog.config.logging import get_logger
from statemlog.config.model import Config

logger = get_logger(__name__)

_config: Config | None = None


def configure(config: Config) -> None:
    """Install ``config`` as the process-wide configuration."""
    global _config
    _config = config
    logger.debug("Process-wide configuration set: %s", config)


def get_config() -> Config:
    """Return the process-wide configuration, loading the defaults on demand."""
    global _config
    if _config is None:
        _config = Config.from_defaults()
    return _config
