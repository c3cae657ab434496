# topmark:header:start
#
#   project      : dfixxer
#   file         : procedure.py
#   file_relpath : src/dfixxer/transformers/procedure.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Add an empty parameter list to routine declarations that have none."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dfixxer.parsing.nodes import ROUTINE_KINDS, SectionKind
from dfixxer.replacements import TextReplacement

if TYPE_CHECKING:
    from dfixxer.config.model import Options
    from dfixxer.parsing.nodes import CodeSection, ParsedNode


def transform_procedure_section(
    section: CodeSection, options: Options, source: str
) -> TextReplacement | None:
    """Insert ``()`` right after the routine name (``procedure Foo;`` -> ``procedure Foo();``)."""
    if section.keyword.kind not in ROUTINE_KINDS:
        return None
    identifier: ParsedNode | None = next(
        (s for s in section.siblings if s.kind is SectionKind.IDENTIFIER), None
    )
    if identifier is None:
        return None
    return TextReplacement.literal(identifier.end, identifier.end, "()")
