# topmark:header:start
#
#   project      : StatemLog
#   file         : __init__.py
#   file_relpath : src/statemlog/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StatemLog CLI subcommands."""
