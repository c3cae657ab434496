# topmark:header:start
#
#   project      : dfixxer
#   file         : __init__.py
#   file_relpath : src/dfixxer/parsing/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Parsing: from Pascal source text to sections and contexts.

[`parse_source`][dfixxer.parsing.parse_source] is the single entry point used
by the pipeline. It parses once and derives from the same tree:

- the ordered code sections ([`dfixxer.parsing.extractor`][dfixxer.parsing.extractor]),
- the spacing and inherited-expansion contexts ([`dfixxer.parsing.contexts`][dfixxer.parsing.contexts]).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dfixxer.parsing.contexts import collect_inherited_expansion_context, collect_spacing_context
from dfixxer.parsing.extractor import extract_sections
from dfixxer.parsing.nodes import CodeSection, ParsedNode, ParseResult, SectionKind

if TYPE_CHECKING:
    from dfixxer.parsing.tree import SyntaxNode


def analyze_tree(root: SyntaxNode, source: str) -> ParseResult:
    """Derive sections and contexts from an already parsed tree."""
    return ParseResult(
        code_sections=tuple(extract_sections(root)),
        spacing_context=collect_spacing_context(root, source),
        inherited_context=collect_inherited_expansion_context(root, source),
    )


def parse_source(source: str) -> ParseResult:
    """Parse ``source`` and return its sections and contexts.

    Raises:
        ParseError: If the grammar cannot be loaded or parsing fails.
    """
    from dfixxer.parsing.treesitter import parse_tree

    return analyze_tree(parse_tree(source), source)


def _span(node: ParsedNode) -> str:
    return f"{node.start_row + 1}:{node.start_column + 1}-{node.end_row + 1}:{node.end_column + 1}"


def format_parse_result(result: ParseResult, source: str) -> str:
    """Render a parse result for the ``parse-debug`` command."""
    lines: list[str] = [f"Code sections: {len(result.code_sections)}"]
    for index, section in enumerate(result.code_sections, start=1):
        keyword: ParsedNode = section.keyword
        lines.append(
            f"Section {index}: {keyword.kind.value} [{_span(keyword)}] {keyword.text(source)!r}"
        )
        for sibling in section.siblings:
            lines.append(f"  {sibling.kind.value} [{_span(sibling)}] {sibling.text(source)!r}")

    spacing = result.spacing_context
    lines.append("Spacing context:")
    for name in (
        "unary_minus_positions",
        "unary_plus_positions",
        "negative_literal_minus_positions",
        "positive_literal_plus_positions",
        "exponent_sign_positions",
        "generic_angle_positions",
        "expr_binary_lt_positions",
        "expr_binary_gt_positions",
    ):
        positions: frozenset[int] = getattr(spacing, name)
        lines.append(f"  {name}: {sorted(positions)}")

    lines.append(f"Inherited expansion candidates: {len(result.inherited_context.candidates)}")
    for candidate in result.inherited_context.candidates:
        lines.append(f"  at {candidate.insert_at}: inherited{candidate.call_text}")
    return "\n".join(lines)


__all__ = [
    "CodeSection",
    "ParseResult",
    "ParsedNode",
    "SectionKind",
    "analyze_tree",
    "format_parse_result",
    "parse_source",
]
