# topmark:header:start
#
#   project      : dfixxer
#   file         : single_keyword.py
#   file_relpath : src/dfixxer/transformers/single_keyword.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Lowercase the ``interface``/``implementation``/``initialization``/``finalization`` keywords."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dfixxer.parsing.nodes import SINGLE_KEYWORD_KINDS

from .utility import adjust_replacement_for_line_position, create_text_replacement_if_different

if TYPE_CHECKING:
    from dfixxer.config.model import Options
    from dfixxer.parsing.nodes import CodeSection
    from dfixxer.replacements import TextReplacement


def transform_single_keyword_section(
    section: CodeSection, options: Options, source: str
) -> TextReplacement | None:
    if section.keyword.kind not in SINGLE_KEYWORD_KINDS:
        return None
    original: str = section.keyword.text(source)
    lowered: str = original.lower()
    if lowered == original:
        return None
    start, text = adjust_replacement_for_line_position(
        source, section.keyword.start, lowered, options
    )
    return create_text_replacement_if_different(source, start, section.keyword.end, text)
