# topmark:header:start
#
#   project      : dfixxer
#   file         : __init__.py
#   file_relpath : src/dfixxer/text/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Lexical text rewriting: operator spacing and trailing-whitespace trimming."""

from __future__ import annotations

from dfixxer.text.scanner import (
    apply_text_changes,
    apply_text_transformation,
    apply_text_transformations,
)

__all__ = [
    "apply_text_changes",
    "apply_text_transformation",
    "apply_text_transformations",
]
