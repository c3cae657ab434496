# topmark:header:start
#
#   project      : dfixxer
#   file         : test_extractor.py
#   file_relpath : tests/parsing/test_extractor.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Section extraction from syntax trees."""

from __future__ import annotations

from dfixxer.parsing.extractor import extract_sections
from dfixxer.parsing.nodes import SectionKind

from tests.helpers import build_tree, node


def _kinds(source: str) -> list[SectionKind]:
    return [s.keyword.kind for s in extract_sections(build_tree(source))]


def test_uses_clause_siblings() -> None:
    """Modules and the terminator are kept in order; commas are dropped."""
    source = "uses B, A;"
    (section,) = extract_sections(build_tree(source))

    assert section.keyword.kind is SectionKind.USES
    assert [(s.kind, s.text(source)) for s in section.siblings] == [
        (SectionKind.MODULE, "B"),
        (SectionKind.MODULE, "A"),
        (SectionKind.SEMICOLON, ";"),
    ]
    assert section.terminator is not None
    assert section.terminator.end == len(source)


def test_uses_clause_keeps_comments_and_directives() -> None:
    """Comments and directives become siblings so the transformer can refuse them."""
    source = "uses A, {$IFDEF X} B, {note} C;"
    (section,) = extract_sections(build_tree(source))
    kinds = [s.kind for s in section.siblings]
    assert SectionKind.PREPROCESSOR in kinds
    assert SectionKind.COMMENT in kinds


def test_uses_clause_without_terminator_is_rejected() -> None:
    """A clause with no closing ``;`` yields no section."""
    assert extract_sections(build_tree("uses A, B")) == []


def test_uses_clause_with_parse_error_is_rejected() -> None:
    """Text the parser did not understand is never rewritten."""
    source = "uses A, ?;"
    clause = node(
        source,
        "declUses",
        0,
        10,
        [
            node(source, "kUses", 0, 4),
            node(source, "moduleName", 5, 6),
            node(source, ",", 6, 7),
            node(source, "ERROR", 8, 9),
            node(source, ";", 9, 10),
        ],
    )
    root = node(source, "root", 0, 10, [clause])
    assert extract_sections(root) == []


def test_unit_header() -> None:
    """A ``unit`` header yields its name and terminator."""
    source = "unit Foo.Bar;"
    (section,) = extract_sections(build_tree(source))
    assert section.keyword.kind is SectionKind.UNIT
    assert [s.kind for s in section.siblings] == [SectionKind.MODULE, SectionKind.SEMICOLON]
    assert section.siblings[0].text(source) == "Foo.Bar"


def test_sections_in_document_order() -> None:
    """Sections are returned in source order."""
    source = "unit U;\ninterface\nuses A;\nimplementation\ninitialization\nfinalization\nend."
    assert _kinds(source) == [
        SectionKind.UNIT,
        SectionKind.INTERFACE,
        SectionKind.USES,
        SectionKind.IMPLEMENTATION,
        SectionKind.INITIALIZATION,
        SectionKind.FINALIZATION,
    ]


def test_routine_without_parameters() -> None:
    """A bare routine declaration yields ``[Identifier, Semicolon]``."""
    source = "procedure Foo;"
    (section,) = extract_sections(build_tree(source))
    assert section.keyword.kind is SectionKind.PROCEDURE_DECLARATION
    identifier, semicolon = section.siblings
    assert identifier.kind is SectionKind.IDENTIFIER
    assert identifier.text(source) == "Foo"
    assert semicolon.kind is SectionKind.SEMICOLON


def test_qualified_function_name() -> None:
    """For ``TFoo.Bar`` the whole qualified name is the identifier."""
    source = "function TFoo.Bar: Integer;"
    (section,) = extract_sections(build_tree(source))
    assert section.keyword.kind is SectionKind.FUNCTION_DECLARATION
    assert section.siblings[0].text(source) == "TFoo.Bar"


def test_routine_with_parameter_list_yields_no_section() -> None:
    """Declarations that already have ``(...)`` are left alone."""
    assert extract_sections(build_tree("procedure Foo(A: Integer);")) == []
    assert extract_sections(build_tree("constructor Create();")) == []
