# topmark:header:start
#
#   project      : StatemLog
#   file         : __main__.py
#   file_relpath : src/statemlog/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running StatemLog via ``python -m statemlog``.

Delegates to `statemlog.cli.main.cli`, the single authoritative CLI entry point.

Examples:
    Translate a crash report stored in a TOML document::

        python -m statemlog translate crash.toml --level debug
"""

from __future__ import annotations

from statemlog.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
