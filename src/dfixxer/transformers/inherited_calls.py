# topmark:header:start
#
#   project      : dfixxer
#   file         : inherited_calls.py
#   file_relpath : src/dfixxer/transformers/inherited_calls.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Expand bare ``inherited;`` statements to explicit calls.

``inherited;`` inside ``constructor TChild.Create(const AName: string)`` becomes
``inherited Create(AName);``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dfixxer.replacements import TextReplacement

if TYPE_CHECKING:
    from dfixxer.parsing.contexts import InheritedExpansionContext


def transform_inherited_calls(context: InheritedExpansionContext) -> list[TextReplacement]:
    """Return one final zero-width insertion per candidate."""
    return [
        TextReplacement.literal(c.insert_at, c.insert_at, c.call_text, final=True)
        for c in context.candidates
    ]
