# topmark:header:start
#
#   project      : StatemLog
#   file         : __init__.py
#   file_relpath : src/statemlog/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StatemLog command-line interface (Click)."""
