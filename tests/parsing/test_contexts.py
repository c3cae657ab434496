# topmark:header:start
#
#   project      : dfixxer
#   file         : test_contexts.py
#   file_relpath : tests/parsing/test_contexts.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Spacing and inherited-expansion contexts collected from syntax trees."""

from __future__ import annotations

from dfixxer.parsing.contexts import (
    InheritedExpansionCandidate,
    collect_inherited_expansion_context,
    collect_spacing_context,
)
from dfixxer.parsing.tree import TreeNode

from tests.helpers import node


def span(source: str, text: str, occurrence: int = 0) -> tuple[int, int]:
    """Return the ``[start, end)`` of the n-th occurrence of ``text``."""
    start = -1
    for _ in range(occurrence + 1):
        start = source.index(text, start + 1)
    return start, start + len(text)


def leaf(source: str, kind: str, text: str, occurrence: int = 0, *, field: str | None = None) -> TreeNode:
    start, end = span(source, text, occurrence)
    return node(source, kind, start, end, field=field)


def test_unary_signs() -> None:
    """Signs of ``exprUnary`` nodes are recorded by position."""
    source = "x := -a + +b"
    minus = leaf(source, "kSub", "-")
    plus = leaf(source, "kAdd", "+", 1)
    root = node(
        source,
        "root",
        0,
        len(source),
        [
            node(source, "exprUnary", minus.start, minus.end + 1, [minus, leaf(source, "identifier", "a")]),
            node(source, "exprUnary", plus.start, plus.end + 1, [plus, leaf(source, "identifier", "b")]),
        ],
    )
    context = collect_spacing_context(root, source)
    assert context.unary_minus_positions == {5}
    assert context.unary_plus_positions == {10}
    assert context.is_unary_sign(5)
    assert not context.is_unary_sign(8)


def test_binary_comparisons_use_operator_field() -> None:
    """Only the ``operator`` child of ``exprBinary`` counts as a comparison."""
    source = "a < b; c >= d"
    lt = node(
        source,
        "exprBinary",
        0,
        5,
        [
            leaf(source, "identifier", "a"),
            leaf(source, "kLt", "<", field="operator"),
            leaf(source, "identifier", "b"),
        ],
    )
    gte = node(
        source,
        "exprBinary",
        7,
        13,
        [
            leaf(source, "identifier", "c"),
            leaf(source, "kGte", ">=", field="operator"),
            leaf(source, "identifier", "d"),
        ],
    )
    context = collect_spacing_context(node(source, "root", 0, len(source), [lt, gte]), source)
    assert context.expr_binary_lt_positions == {2}
    assert context.expr_binary_gt_positions == {9}
    assert context.is_binary_comparison(9)


def test_number_literals() -> None:
    """Leading signs and exponent signs of number literals are recorded."""
    source = "x := -5 + 1.5e-3 + +2"
    root = node(
        source,
        "root",
        0,
        len(source),
        [
            leaf(source, "literalNumber", "-5"),
            leaf(source, "literalNumber", "1.5e-3"),
            leaf(source, "literalNumber", "+2"),
        ],
    )
    context = collect_spacing_context(root, source)
    assert context.negative_literal_minus_positions == {5}
    assert context.positive_literal_plus_positions == {19}
    assert context.exponent_sign_positions == {14}


def test_generic_angles() -> None:
    """Every angle bracket inside a generic node is recorded."""
    source = "TList<Integer>"
    root = node(source, "root", 0, len(source), [node(source, "typerefTpl", 0, len(source))])
    assert collect_spacing_context(root, source).generic_angle_positions == {5, 13}


CONSTRUCTOR = "constructor TChild.Create(AName: string; AAge: Integer);\nbegin\n  inherited;\nend;"


def _def_proc(source: str, statement: TreeNode) -> TreeNode:
    head_end = source.index(";\n") + 1
    decl_args = node(
        source,
        "declArgs",
        *span(source, "(AName: string; AAge: Integer)"),
        children=[
            node(
                source,
                "declArg",
                *span(source, "AName: string"),
                children=[leaf(source, "identifier", "AName"), leaf(source, ":", ":")],
            ),
            node(
                source,
                "declArg",
                *span(source, "AAge: Integer"),
                children=[leaf(source, "identifier", "AAge"), leaf(source, ":", ":", 1)],
            ),
        ],
    )
    decl_proc = node(
        source,
        "declProc",
        0,
        head_end,
        [
            leaf(source, "kConstructor", "constructor"),
            node(
                source,
                "genericDot",
                *span(source, "TChild.Create"),
                children=[leaf(source, "identifier", "TChild"), leaf(source, "identifier", "Create")],
            ),
            decl_args,
            node(source, ";", head_end - 1, head_end),
        ],
    )
    block = node(
        source,
        "block",
        source.index("begin"),
        len(source) - 1,
        [leaf(source, "kBegin", "begin"), statement, leaf(source, "kEnd", "end")],
    )
    return node(source, "defProc", 0, len(source), [decl_proc, block])


def _inherited_statement(source: str, *, extra: str | None = None) -> TreeNode:
    keyword = leaf(source, "kInherited", "inherited")
    parts = [keyword]
    if extra is not None:
        extra_start = source.index(extra, keyword.end)
        parts.append(node(source, "identifier", extra_start, extra_start + len(extra)))
    inherited = node(source, "inherited", keyword.start, parts[-1].end, parts)
    semicolon_at = source.index(";", inherited.end)
    semicolon = node(source, ";", semicolon_at, semicolon_at + 1)
    return node(source, "statement", keyword.start, semicolon.end, [inherited, semicolon])


def test_bare_inherited_becomes_candidate() -> None:
    """``inherited;`` is expanded with the routine name and parameter names."""
    source = CONSTRUCTOR
    root = node(source, "root", 0, len(source), [_def_proc(source, _inherited_statement(source))])

    context = collect_inherited_expansion_context(root, source)

    insert_at = span(source, "inherited")[1]
    assert context.candidates == (
        InheritedExpansionCandidate(insert_at, "Create", ("AName", "AAge")),
    )
    assert context.candidates[0].call_text == " Create(AName, AAge)"


def test_explicit_inherited_call_is_not_a_candidate() -> None:
    """``inherited Create;`` already names its target."""
    source = CONSTRUCTOR.replace("inherited;", "inherited Create;")
    statement = _inherited_statement(source, extra="Create")
    root = node(source, "root", 0, len(source), [_def_proc(source, statement)])
    assert collect_inherited_expansion_context(root, source).candidates == ()


def test_routine_without_parameters_gets_empty_call() -> None:
    """A routine with no parameter list expands to ``Name()``."""
    source = "procedure TChild.Paint;\nbegin\n  inherited;\nend;"
    decl_end = source.index(";\n") + 1
    decl_proc = node(
        source,
        "declProc",
        0,
        decl_end,
        [
            leaf(source, "kProcedure", "procedure"),
            node(
                source,
                "genericDot",
                *span(source, "TChild.Paint"),
                children=[leaf(source, "identifier", "TChild"), leaf(source, "identifier", "Paint")],
            ),
            node(source, ";", decl_end - 1, decl_end),
        ],
    )
    block = node(
        source,
        "block",
        source.index("begin"),
        len(source) - 1,
        [leaf(source, "kBegin", "begin"), _inherited_statement(source), leaf(source, "kEnd", "end")],
    )
    root = node(source, "root", 0, len(source), [node(source, "defProc", 0, len(source), [decl_proc, block])])

    (candidate,) = collect_inherited_expansion_context(root, source).candidates
    assert candidate.routine_name == "Paint"
    assert candidate.call_text == " Paint()"
