# topmark:header:start
#
#   project      : dfixxer
#   file         : __init__.py
#   file_relpath : src/dfixxer/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Subcommands of the dfixxer CLI."""
