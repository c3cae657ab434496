# topmark:header:start
#
#   project      : dfixxer
#   file         : extractor.py
#   file_relpath : src/dfixxer/parsing/extractor.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Section extractor: turn a syntax tree into an ordered list of code sections.

The walk is a pre-order traversal with an explicit stack. When a node of a
recognized keyword kind is met, one section is built from it and the node's
subtree is not visited further. Sections touching a parse error are rejected:
text the parser did not understand is never rewritten.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from dfixxer.config.logging import get_logger
from dfixxer.parsing.nodes import CodeSection, ParsedNode, SectionKind
from dfixxer.parsing.tree import walk

if TYPE_CHECKING:
    from dfixxer.config.logging import DfixxerLogger
    from dfixxer.parsing.tree import SyntaxNode

logger: DfixxerLogger = get_logger(__name__)

CLAUSE_KEYWORDS: Final[dict[str, SectionKind]] = {
    "kUses": SectionKind.USES,
    "kProgram": SectionKind.PROGRAM,
    "kUnit": SectionKind.UNIT,
}

SINGLE_KEYWORDS: Final[dict[str, SectionKind]] = {
    "kInterface": SectionKind.INTERFACE,
    "kImplementation": SectionKind.IMPLEMENTATION,
    "kInitialization": SectionKind.INITIALIZATION,
    "kFinalization": SectionKind.FINALIZATION,
}

ROUTINE_KEYWORDS: Final[dict[str, SectionKind]] = {
    "kProcedure": SectionKind.PROCEDURE_DECLARATION,
    "kConstructor": SectionKind.PROCEDURE_DECLARATION,
    "kDestructor": SectionKind.PROCEDURE_DECLARATION,
    "kFunction": SectionKind.FUNCTION_DECLARATION,
    "kOperator": SectionKind.FUNCTION_DECLARATION,
}

DECL_PROC: Final[str] = "declProc"

TERMINATOR_KINDS: Final[frozenset[str]] = frozenset({";", "kEnd"})


def _is_section_node(node: SyntaxNode) -> bool:
    return node.kind in CLAUSE_KEYWORDS or node.kind in SINGLE_KEYWORDS or node.kind == DECL_PROC


def _describe(node: SyntaxNode) -> str:
    row, column = node.start_point
    return f"{node.kind} at {row + 1}:{column + 1}"


def build_clause_section(keyword: SyntaxNode, kind: SectionKind) -> CodeSection | None:
    """Build a ``uses``/``unit``/``program`` section from its keyword node.

    The siblings are the other children of the keyword's parent. Modules,
    comments, directives and terminators are kept; commas are dropped.

    Args:
        keyword (SyntaxNode): The ``kUses``/``kUnit``/``kProgram`` node.
        kind (SectionKind): Section kind matching ``keyword``.

    Returns:
        CodeSection | None: The section, or ``None`` when it must not be rewritten.
    """
    if keyword.has_error:
        logger.debug("Rejecting %s: keyword has a parse error", _describe(keyword))
        return None
    parent: SyntaxNode | None = keyword.parent
    if parent is None:
        return None
    if kind is SectionKind.USES and parent.has_error:
        logger.debug("Rejecting %s: enclosing clause has a parse error", _describe(keyword))
        return None

    is_header: bool = kind in (SectionKind.UNIT, SectionKind.PROGRAM)
    siblings: list[ParsedNode] = []
    found_module = False
    for child in parent.children:
        if child.has_error:
            logger.debug("Rejecting %s: sibling %s has a parse error", _describe(keyword), child.kind)
            return None
        if child is keyword:
            continue
        if child.kind in TERMINATOR_KINDS:
            siblings.append(ParsedNode.from_node(child, SectionKind.SEMICOLON))
            if is_header and found_module:
                break
            continue
        match child.kind:
            case ",":
                continue
            case "moduleName" | "identifier":
                found_module = True
                siblings.append(ParsedNode.from_node(child, SectionKind.MODULE))
            case "comment":
                siblings.append(ParsedNode.from_node(child, SectionKind.COMMENT))
            case "pp":
                siblings.append(ParsedNode.from_node(child, SectionKind.PREPROCESSOR))
            case _:
                if not is_header:
                    siblings.append(ParsedNode.from_node(child, SectionKind.MODULE))

    section = CodeSection(keyword=ParsedNode.from_node(keyword, kind), siblings=tuple(siblings))
    if section.terminator is None:
        logger.debug("Rejecting %s: no terminator", _describe(keyword))
        return None
    return section


def build_single_keyword_section(keyword: SyntaxNode, kind: SectionKind) -> CodeSection | None:
    """Build a sibling-less section for ``interface``/``implementation``/..."""
    if keyword.has_error:
        return None
    return CodeSection(keyword=ParsedNode.from_node(keyword, kind))


def build_routine_section(decl_proc: SyntaxNode) -> CodeSection | None:
    """Build a section for a routine declaration without a parameter list.

    Declarations that already carry ``(...)`` yield no section.

    Args:
        decl_proc (SyntaxNode): A ``declProc`` node.

    Returns:
        CodeSection | None: Section with siblings ``[Identifier, Semicolon]``, or ``None``.
    """
    if decl_proc.has_error:
        return None
    routine_keyword: SyntaxNode | None = None
    routine_name: SyntaxNode | None = None
    semicolon: SyntaxNode | None = None
    for child in decl_proc.children:
        if child.kind in ROUTINE_KEYWORDS:
            routine_keyword = child
        elif child.kind == "identifier":
            if routine_name is None:
                routine_name = child
        elif child.kind == "genericDot":
            routine_name = child
        elif child.kind == "declArgs":
            return None
        elif child.kind == ";":
            semicolon = child
    if routine_keyword is None or routine_name is None or semicolon is None:
        return None
    return CodeSection(
        keyword=ParsedNode.from_node(routine_keyword, ROUTINE_KEYWORDS[routine_keyword.kind]),
        siblings=(
            ParsedNode.from_node(routine_name, SectionKind.IDENTIFIER),
            ParsedNode.from_node(semicolon, SectionKind.SEMICOLON),
        ),
    )


def extract_sections(root: SyntaxNode) -> list[CodeSection]:
    """Collect every rewritable section of the tree in document order.

    Args:
        root (SyntaxNode): Root of the syntax tree.

    Returns:
        list[CodeSection]: Sections, outermost first, in source order.
    """
    sections: list[CodeSection] = []
    for node in walk(root, prune=_is_section_node):
        section: CodeSection | None = None
        if node.kind in CLAUSE_KEYWORDS:
            section = build_clause_section(node, CLAUSE_KEYWORDS[node.kind])
        elif node.kind in SINGLE_KEYWORDS:
            section = build_single_keyword_section(node, SINGLE_KEYWORDS[node.kind])
        elif node.kind == DECL_PROC:
            section = build_routine_section(node)
        if section is not None:
            sections.append(section)
    logger.debug("Extracted %d section(s)", len(sections))
    return sections
