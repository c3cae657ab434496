# topmark:header:start
#
#   project      : dfixxer
#   file         : nodes.py
#   file_relpath : src/dfixxer/parsing/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Section records produced by the extractor.

A [`CodeSection`][dfixxer.parsing.nodes.CodeSection] is one recognized construct
(a ``uses`` clause, a ``unit`` header, a bare routine declaration, ...). It is
built once from the syntax tree and never modified afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from dfixxer.parsing.contexts import InheritedExpansionContext, SpacingContext

if TYPE_CHECKING:
    from dfixxer.parsing.tree import SyntaxNode


class SectionKind(Enum):
    """Tag of a section keyword or of one of its siblings."""

    USES = "Uses"
    UNIT = "Unit"
    PROGRAM = "Program"
    INTERFACE = "Interface"
    IMPLEMENTATION = "Implementation"
    INITIALIZATION = "Initialization"
    FINALIZATION = "Finalization"
    MODULE = "Module"
    COMMENT = "Comment"
    PREPROCESSOR = "Preprocessor"
    SEMICOLON = "Semicolon"
    IDENTIFIER = "Identifier"
    PROCEDURE_DECLARATION = "ProcedureDeclaration"
    FUNCTION_DECLARATION = "FunctionDeclaration"


SINGLE_KEYWORD_KINDS: frozenset[SectionKind] = frozenset(
    {
        SectionKind.INTERFACE,
        SectionKind.IMPLEMENTATION,
        SectionKind.INITIALIZATION,
        SectionKind.FINALIZATION,
    }
)

ROUTINE_KINDS: frozenset[SectionKind] = frozenset(
    {SectionKind.PROCEDURE_DECLARATION, SectionKind.FUNCTION_DECLARATION}
)


@dataclass(frozen=True, slots=True)
class ParsedNode:
    """Span of one node, detached from the syntax tree.

    Attributes:
        kind (SectionKind): Role of the node within its section.
        start (int): Start character offset.
        end (int): End character offset (exclusive).
        start_row (int): 0-based start row.
        start_column (int): 0-based start column.
        end_row (int): 0-based end row.
        end_column (int): 0-based end column.
    """

    kind: SectionKind
    start: int
    end: int
    start_row: int = 0
    start_column: int = 0
    end_row: int = 0
    end_column: int = 0

    @classmethod
    def from_node(cls, node: SyntaxNode, kind: SectionKind) -> ParsedNode:
        """Capture the span of ``node`` under the given role."""
        return cls(
            kind=kind,
            start=node.start,
            end=node.end,
            start_row=node.start_point[0],
            start_column=node.start_point[1],
            end_row=node.end_point[0],
            end_column=node.end_point[1],
        )

    def text(self, source: str) -> str:
        """Return the source text covered by this node."""
        return source[self.start : self.end]


@dataclass(frozen=True, slots=True)
class CodeSection:
    """One recognized construct: a keyword plus its ordered siblings.

    For ``uses``/``unit``/``program`` sections the last ``SEMICOLON`` sibling is
    the terminator (a ``;`` or an ``end``-class token).
    """

    keyword: ParsedNode
    siblings: tuple[ParsedNode, ...] = ()

    @property
    def terminator(self) -> ParsedNode | None:
        """Closing ``;``/``end`` of the section, if any."""
        for sibling in reversed(self.siblings):
            if sibling.kind is SectionKind.SEMICOLON:
                return sibling
        return None

    def siblings_of_kind(self, kind: SectionKind) -> list[ParsedNode]:
        """Return the siblings tagged ``kind``, in source order."""
        return [s for s in self.siblings if s.kind is kind]


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Everything the transformers need from one parse."""

    code_sections: tuple[CodeSection, ...] = ()
    spacing_context: SpacingContext = field(default_factory=SpacingContext)
    inherited_context: InheritedExpansionContext = field(default_factory=InheritedExpansionContext)
