# topmark:header:start
#
#   project      : dfixxer
#   file         : contexts.py
#   file_relpath : src/dfixxer/parsing/contexts.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Tree-derived contexts consumed by the text scanner and the inherited-call pass.

The text scanner is lexical; on its own it cannot tell a binary ``-`` from a
unary one, or a comparison ``<`` from a generic bracket. The
[`SpacingContext`][dfixxer.parsing.contexts.SpacingContext] records, by absolute
character position, which operator characters the grammar classified, so the
scanner can space each one correctly.

The [`InheritedExpansionContext`][dfixxer.parsing.contexts.InheritedExpansionContext]
lists bare ``inherited;`` statements that can be expanded to an explicit call of
the enclosing routine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from dfixxer.config.logging import get_logger
from dfixxer.parsing.tree import walk

if TYPE_CHECKING:
    from dfixxer.config.logging import DfixxerLogger
    from dfixxer.parsing.tree import SyntaxNode

logger: DfixxerLogger = get_logger(__name__)

GENERIC_NODE_KINDS: frozenset[str] = frozenset({"genericTpl", "typerefTpl", "genericDot", "exprTpl"})


@dataclass(frozen=True, slots=True)
class SpacingContext:
    """Operator positions classified by the grammar (absolute character offsets)."""

    unary_minus_positions: frozenset[int] = frozenset()
    unary_plus_positions: frozenset[int] = frozenset()
    negative_literal_minus_positions: frozenset[int] = frozenset()
    positive_literal_plus_positions: frozenset[int] = frozenset()
    exponent_sign_positions: frozenset[int] = frozenset()
    generic_angle_positions: frozenset[int] = frozenset()
    expr_binary_lt_positions: frozenset[int] = frozenset()
    expr_binary_gt_positions: frozenset[int] = frozenset()

    def is_unary_sign(self, pos: int) -> bool:
        """Whether the ``+``/``-`` at ``pos`` is a prefix sign (unary or literal)."""
        return (
            pos in self.unary_minus_positions
            or pos in self.unary_plus_positions
            or pos in self.negative_literal_minus_positions
            or pos in self.positive_literal_plus_positions
        )

    def is_binary_comparison(self, pos: int) -> bool:
        """Whether a ``<``/``>``-family operator at ``pos`` is a binary comparison."""
        return pos in self.expr_binary_lt_positions or pos in self.expr_binary_gt_positions


def collect_spacing_context(root: SyntaxNode, source: str) -> SpacingContext:
    """Walk the tree once and record classified operator positions.

    Args:
        root (SyntaxNode): Root of the syntax tree.
        source (str): Text the tree was parsed from.

    Returns:
        SpacingContext: The collected positions.
    """
    unary_minus: set[int] = set()
    unary_plus: set[int] = set()
    negative_literal: set[int] = set()
    positive_literal: set[int] = set()
    exponent_signs: set[int] = set()
    generic_angles: set[int] = set()
    binary_lt: set[int] = set()
    binary_gt: set[int] = set()

    for node in walk(root):
        match node.kind:
            case kind if kind in GENERIC_NODE_KINDS:
                for offset, ch in enumerate(source[node.start : node.end]):
                    if ch in "<>":
                        generic_angles.add(node.start + offset)
            case "exprUnary":
                for child in node.children:
                    if child.kind == "kSub":
                        unary_minus.add(child.start)
                    elif child.kind == "kAdd":
                        unary_plus.add(child.start)
            case "exprBinary":
                operator: SyntaxNode | None = node.child_by_field_name("operator")
                if operator is not None:
                    match source[operator.start : operator.end]:
                        case "<" | "<=" | "<>":
                            binary_lt.add(operator.start)
                        case ">" | ">=":
                            binary_gt.add(operator.start)
                        case _:
                            pass
            case "literalNumber":
                text: str = source[node.start : node.end]
                if text.startswith("-"):
                    negative_literal.add(node.start)
                elif text.startswith("+"):
                    positive_literal.add(node.start)
                for offset in range(len(text) - 1):
                    if text[offset] in "eE" and text[offset + 1] in "+-":
                        exponent_signs.add(node.start + offset + 1)
            case _:
                pass

    return SpacingContext(
        unary_minus_positions=frozenset(unary_minus),
        unary_plus_positions=frozenset(unary_plus),
        negative_literal_minus_positions=frozenset(negative_literal),
        positive_literal_plus_positions=frozenset(positive_literal),
        exponent_sign_positions=frozenset(exponent_signs),
        generic_angle_positions=frozenset(generic_angles),
        expr_binary_lt_positions=frozenset(binary_lt),
        expr_binary_gt_positions=frozenset(binary_gt),
    )


@dataclass(frozen=True, slots=True)
class InheritedExpansionCandidate:
    """A bare ``inherited;`` that can become ``inherited Name(Args);``.

    Attributes:
        insert_at (int): Character offset right after the ``inherited`` keyword.
        routine_name (str): Unqualified name of the enclosing routine.
        arg_names (tuple[str, ...]): Parameter names of the enclosing routine.
    """

    insert_at: int
    routine_name: str
    arg_names: tuple[str, ...] = ()

    @property
    def call_text(self) -> str:
        """Text inserted after ``inherited``, e.g. ``" Create(AName)"``."""
        return f" {self.routine_name}({', '.join(self.arg_names)})"


@dataclass(frozen=True, slots=True)
class InheritedExpansionContext:
    """All expansion candidates of one source, in document order."""

    candidates: tuple[InheritedExpansionCandidate, ...] = field(default=())


def _routine_name(decl_proc: SyntaxNode, source: str) -> str | None:
    fallback: str | None = None
    for child in decl_proc.children:
        if child.kind == "identifier" and fallback is None:
            fallback = source[child.start : child.end]
        elif child.kind == "genericDot":
            identifiers = [c for c in child.children if c.kind == "identifier"]
            if identifiers:
                last: SyntaxNode = identifiers[-1]
                return source[last.start : last.end]
    return fallback


def _arg_names(decl_proc: SyntaxNode, source: str) -> tuple[str, ...]:
    decl_args: SyntaxNode | None = next(
        (c for c in decl_proc.children if c.kind == "declArgs"), None
    )
    if decl_args is None:
        return ()
    names: list[str] = []
    for decl_arg in decl_args.children:
        if decl_arg.kind != "declArg":
            continue
        for child in decl_arg.children:
            if child.kind == ":":
                break
            if child.kind == "identifier":
                names.append(source[child.start : child.end])
    return tuple(names)


def _bare_inherited_insert_at(statement: SyntaxNode, source: str) -> int | None:
    if statement.kind != "statement" or statement.has_error:
        return None
    inherited: SyntaxNode | None = None
    semicolon: SyntaxNode | None = None
    for child in statement.children:
        if child.kind == "inherited":
            if inherited is not None:
                return None
            inherited = child
        elif child.kind == ";" and semicolon is None:
            semicolon = child
    if inherited is None or semicolon is None:
        return None
    if len(inherited.children) != 1 or inherited.children[0].kind != "kInherited":
        return None
    if source[inherited.end : semicolon.start].strip():
        return None
    return inherited.end


def _candidates_for_def_proc(
    def_proc: SyntaxNode, source: str
) -> list[InheritedExpansionCandidate]:
    if def_proc.has_error:
        return []
    decl_proc: SyntaxNode | None = None
    block: SyntaxNode | None = None
    for child in def_proc.children:
        if child.kind == "declProc":
            decl_proc = child
        elif child.kind == "block":
            block = child
    if decl_proc is None or block is None or decl_proc.has_error or block.has_error:
        return []
    name: str | None = _routine_name(decl_proc, source)
    if name is None:
        return []
    args: tuple[str, ...] = _arg_names(decl_proc, source)

    candidates: list[InheritedExpansionCandidate] = []
    for node in walk(block, prune=lambda n: n.kind == "defProc"):
        if node.kind == "defProc":
            continue
        insert_at: int | None = _bare_inherited_insert_at(node, source)
        if insert_at is not None:
            candidates.append(InheritedExpansionCandidate(insert_at, name, args))
    return candidates


def collect_inherited_expansion_context(root: SyntaxNode, source: str) -> InheritedExpansionContext:
    """Find every bare ``inherited;`` statement inside a routine body.

    Nested routines are handled on their own; their statements are attributed to
    the innermost enclosing routine only.

    Args:
        root (SyntaxNode): Root of the syntax tree.
        source (str): Text the tree was parsed from.

    Returns:
        InheritedExpansionContext: Candidates in document order.
    """
    candidates: list[InheritedExpansionCandidate] = []
    for node in walk(root):
        if node.kind == "defProc":
            candidates.extend(_candidates_for_def_proc(node, source))
    candidates.sort(key=lambda c: c.insert_at)
    logger.debug("Found %d bare inherited statement(s)", len(candidates))
    return InheritedExpansionContext(candidates=tuple(candidates))
