# topmark:header:start
#
#   project      : dfixxer
#   file         : __init__.py
#   file_relpath : src/dfixxer/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""dfixxer package.

dfixxer is a formatter for Delphi/Pascal sources. It parses a file with an
external tree-sitter grammar, recognizes a handful of sections (uses clauses,
unit/program headers, section keywords, routine declarations), rewrites them,
normalizes operator spacing outside strings and comments, and splices the
resulting edits back into the original text.
"""

from __future__ import annotations
