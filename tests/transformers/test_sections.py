# topmark:header:start
#
#   project      : dfixxer
#   file         : test_sections.py
#   file_relpath : tests/transformers/test_sections.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Header, keyword, routine and inherited-call transformers, and dispatch."""

from __future__ import annotations

from dfixxer.config.model import LineEnding, Options, TransformationOptions
from dfixxer.parsing.contexts import InheritedExpansionCandidate, InheritedExpansionContext
from dfixxer.parsing.extractor import extract_sections
from dfixxer.parsing.nodes import CodeSection, ParsedNode, SectionKind
from dfixxer.replacements import TextReplacement
from dfixxer.transformers import (
    transform_inherited_calls,
    transform_procedure_section,
    transform_section,
    transform_single_keyword_section,
    transform_unit_program_section,
)
from dfixxer.transformers.utility import adjust_replacement_for_line_position, find_line_start

from tests.helpers import build_tree

LF = Options(line_ending=LineEnding.LF)


def _only_section(source: str) -> CodeSection:
    (section,) = extract_sections(build_tree(source))
    return section


def test_unit_header_is_normalized() -> None:
    """Keyword case and spacing are normalized."""
    source = "UNIT   Foo ;\n"
    replacement = transform_unit_program_section(_only_section(source), LF, source)
    assert replacement == TextReplacement.literal(0, 12, "unit Foo;")


def test_program_header_already_formatted() -> None:
    """Nothing to do for ``program Foo;``."""
    source = "program Foo;"
    assert transform_unit_program_section(_only_section(source), LF, source) is None


def test_header_with_extra_siblings_is_left_alone() -> None:
    """Only ``keyword name ;`` headers are rewritten."""
    source = "unit {x} Foo;"
    section = CodeSection(
        keyword=ParsedNode(SectionKind.UNIT, 0, 4),
        siblings=(
            ParsedNode(SectionKind.COMMENT, 5, 8),
            ParsedNode(SectionKind.MODULE, 9, 12),
            ParsedNode(SectionKind.SEMICOLON, 12, 13),
        ),
    )
    assert transform_unit_program_section(section, LF, source) is None


def test_single_keyword_is_lowercased() -> None:
    """Section keywords are written in lower case."""
    source = "INTERFACE\n"
    replacement = transform_single_keyword_section(_only_section(source), LF, source)
    assert replacement == TextReplacement.literal(0, 9, "interface")


def test_single_keyword_drops_indentation() -> None:
    """Indentation before a keyword is removed."""
    source = "  Implementation"
    replacement = transform_single_keyword_section(_only_section(source), LF, source)
    assert replacement == TextReplacement.literal(0, 16, "implementation")


def test_single_keyword_lowercase_is_untouched() -> None:
    """An indented but lowercase keyword is left as it is."""
    source = "  initialization"
    assert transform_single_keyword_section(_only_section(source), LF, source) is None


def test_mid_line_keyword_moves_to_new_line() -> None:
    """Code in front of a keyword stays; the keyword starts a new line."""
    source = "x; Finalization"
    replacement = transform_single_keyword_section(_only_section(source), LF, source)
    assert replacement == TextReplacement.literal(3, 15, "\nfinalization")


def test_procedure_gets_empty_parameter_list() -> None:
    """``()`` is inserted right after the routine name."""
    source = "procedure Foo;"
    replacement = transform_procedure_section(_only_section(source), LF, source)
    assert replacement == TextReplacement.literal(13, 13, "()")
    assert not replacement.final


def test_inherited_calls_are_final_insertions() -> None:
    """Each candidate becomes a zero-width final insertion."""
    context = InheritedExpansionContext(
        candidates=(InheritedExpansionCandidate(42, "Create", ("AOwner",)),)
    )
    assert transform_inherited_calls(context) == [
        TextReplacement.literal(42, 42, " Create(AOwner)", final=True)
    ]


def test_transform_section_honors_switches() -> None:
    """Disabled passes produce no replacement."""
    source = "uses B, A;"
    section = _only_section(source)
    assert transform_section(section, LF, source) is not None
    disabled = Options(
        line_ending=LineEnding.LF,
        transformations=TransformationOptions(enable_uses_section=False),
    )
    assert transform_section(section, disabled, source) is None

    routine_source = "procedure Foo;"
    routine = _only_section(routine_source)
    no_routines = Options(transformations=TransformationOptions(enable_procedure_section=False))
    assert transform_section(routine, no_routines, routine_source) is None


def test_find_line_start() -> None:
    """The line start is just after the previous ``\\n``."""
    source = "ab\r\ncd"
    assert find_line_start(source, 1) == 0
    assert find_line_start(source, 5) == 4


def test_adjust_replacement_uses_configured_line_ending() -> None:
    """Mid-line sections are preceded by the configured line ending."""
    crlf = Options(line_ending=LineEnding.CRLF)
    assert adjust_replacement_for_line_position("x; uses", 3, "uses", crlf) == (3, "\r\nuses")
