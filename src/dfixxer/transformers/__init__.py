# topmark:header:start
#
#   project      : dfixxer
#   file         : __init__.py
#   file_relpath : src/dfixxer/transformers/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Section transformers.

Each transformer maps one [`CodeSection`][dfixxer.parsing.nodes.CodeSection]
to at most one [`TextReplacement`][dfixxer.replacements.TextReplacement];
[`transform_section`][dfixxer.transformers.transform_section] routes a section
to its transformer when the matching pass is enabled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dfixxer.parsing.nodes import ROUTINE_KINDS, SINGLE_KEYWORD_KINDS, SectionKind
from dfixxer.transformers.inherited_calls import transform_inherited_calls
from dfixxer.transformers.procedure import transform_procedure_section
from dfixxer.transformers.single_keyword import transform_single_keyword_section
from dfixxer.transformers.unit_program import transform_unit_program_section
from dfixxer.transformers.uses_section import transform_uses_section

if TYPE_CHECKING:
    from dfixxer.config.model import Options
    from dfixxer.parsing.nodes import CodeSection
    from dfixxer.replacements import TextReplacement


def transform_section(section: CodeSection, options: Options, source: str) -> TextReplacement | None:
    """Dispatch ``section`` to its transformer.

    Returns:
        TextReplacement | None: The replacement, or ``None`` when the pass is
            disabled, the section is rejected, or nothing changes.
    """
    enabled = options.transformations
    kind: SectionKind = section.keyword.kind
    if kind is SectionKind.USES:
        return transform_uses_section(section, options, source) if enabled.enable_uses_section else None
    if kind in (SectionKind.UNIT, SectionKind.PROGRAM):
        if not enabled.enable_unit_program_section:
            return None
        return transform_unit_program_section(section, options, source)
    if kind in SINGLE_KEYWORD_KINDS:
        if not enabled.enable_single_keyword_sections:
            return None
        return transform_single_keyword_section(section, options, source)
    if kind in ROUTINE_KINDS:
        if not enabled.enable_procedure_section:
            return None
        return transform_procedure_section(section, options, source)
    return None


__all__ = [
    "transform_inherited_calls",
    "transform_procedure_section",
    "transform_section",
    "transform_single_keyword_section",
    "transform_unit_program_section",
    "transform_uses_section",
]
