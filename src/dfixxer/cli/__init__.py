# topmark:header:start
#
#   project      : dfixxer
#   file         : __init__.py
#   file_relpath : src/dfixxer/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Command-line interface for dfixxer (Click)."""
