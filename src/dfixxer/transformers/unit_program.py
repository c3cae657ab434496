# topmark:header:start
#
#   project      : dfixxer
#   file         : unit_program.py
#   file_relpath : src/dfixxer/transformers/unit_program.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Normalize ``unit``/``program`` headers to ``unit Name;`` on one line."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dfixxer.parsing.nodes import SectionKind

from .utility import adjust_replacement_for_line_position, create_text_replacement_if_different

if TYPE_CHECKING:
    from dfixxer.config.model import Options
    from dfixxer.parsing.nodes import CodeSection
    from dfixxer.replacements import TextReplacement

HEADER_KEYWORDS: dict[SectionKind, str] = {
    SectionKind.UNIT: "unit",
    SectionKind.PROGRAM: "program",
}


def transform_unit_program_section(
    section: CodeSection, options: Options, source: str
) -> TextReplacement | None:
    """Return the replacement for a header, or ``None``.

    Only headers made of exactly a name and a semicolon are rewritten.
    """
    keyword: str | None = HEADER_KEYWORDS.get(section.keyword.kind)
    if keyword is None or len(section.siblings) != 2:
        return None
    name, semicolon = section.siblings
    if name.kind is not SectionKind.MODULE or semicolon.kind is not SectionKind.SEMICOLON:
        return None

    text: str = f"{keyword} {name.text(source)};"
    start, text = adjust_replacement_for_line_position(source, section.keyword.start, text, options)
    return create_text_replacement_if_different(source, start, semicolon.end, text)
