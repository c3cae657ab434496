# topmark:header:start
#
#   project      : dfixxer
#   file         : tree.py
#   file_relpath : src/dfixxer/parsing/tree.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Syntax node abstraction shared by the parser adapter and the tree walkers.

The extractor and the context collectors only rely on the
[`SyntaxNode`][dfixxer.parsing.tree.SyntaxNode] protocol, so any tree exposing
node kinds, character offsets, error flags and parent/child links can drive
them. [`TreeNode`][dfixxer.parsing.tree.TreeNode] is the concrete
implementation produced by the tree-sitter adapter and built by hand in tests.

Offsets are character offsets into the decoded ``str``, half-open ``[start, end)``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Protocol


class SyntaxNode(Protocol):
    """Read-only view of one node of a concrete syntax tree."""

    @property
    def kind(self) -> str: ...

    @property
    def start(self) -> int: ...

    @property
    def end(self) -> int: ...

    @property
    def start_point(self) -> tuple[int, int]: ...

    @property
    def end_point(self) -> tuple[int, int]: ...

    @property
    def has_error(self) -> bool: ...

    @property
    def children(self) -> Sequence[SyntaxNode]: ...

    @property
    def parent(self) -> SyntaxNode | None: ...

    def child_by_field_name(self, name: str) -> SyntaxNode | None: ...


@dataclass(eq=False)
class TreeNode:
    """Concrete syntax node.

    Nodes compare by identity, like tree-sitter nodes of one tree. ``has_error``
    covers the whole subtree: it is set when the node itself is an error or
    missing node, or when any descendant is.

    Attributes:
        kind (str): Grammar node kind (``"kUses"``, ``";"``, ``"identifier"``, ...).
        start (int): Start character offset.
        end (int): End character offset (exclusive).
        start_point (tuple[int, int]): 0-based ``(row, column)`` of ``start``.
        end_point (tuple[int, int]): 0-based ``(row, column)`` of ``end``.
        has_error (bool): Whether the subtree contains a parse error.
        field_name (str | None): Field name of this node within its parent.
        children (list[TreeNode]): Ordered child nodes.
        parent (TreeNode | None): Parent node, ``None`` for the root.
    """

    kind: str
    start: int
    end: int
    start_point: tuple[int, int] = (0, 0)
    end_point: tuple[int, int] = (0, 0)
    has_error: bool = False
    field_name: str | None = None
    children: list[TreeNode] = field(default_factory=lambda: [])
    parent: TreeNode | None = field(default=None, repr=False)

    def attach(self, child: TreeNode) -> None:
        """Append ``child`` and link it back to this node."""
        child.parent = self
        self.children.append(child)

    def child_by_field_name(self, name: str) -> TreeNode | None:
        """Return the first child stored under field ``name``."""
        for child in self.children:
            if child.field_name == name:
                return child
        return None

    def text(self, source: str) -> str:
        """Return the source text covered by this node."""
        return source[self.start : self.end]

    @classmethod
    def build(
        cls,
        kind: str,
        start: int,
        end: int,
        children: Iterable[TreeNode] = (),
        *,
        has_error: bool = False,
        field: str | None = None,
        start_point: tuple[int, int] | None = None,
        end_point: tuple[int, int] | None = None,
    ) -> TreeNode:
        """Build a node and attach ``children``.

        Points default to ``(0, start)`` / ``(0, end)``, which is exact for
        single-line sources. The error flag propagates up from children.
        """
        node = cls(
            kind=kind,
            start=start,
            end=end,
            start_point=start_point if start_point is not None else (0, start),
            end_point=end_point if end_point is not None else (0, end),
            has_error=has_error or kind == "ERROR",
            field_name=field,
        )
        for child in children:
            node.attach(child)
            if child.has_error:
                node.has_error = True
        return node


def walk(root: SyntaxNode, *, prune: Callable[[SyntaxNode], bool] | None = None) -> Iterator[SyntaxNode]:
    """Yield ``root`` and its descendants in pre-order, without recursion.

    Args:
        root (SyntaxNode): Node to start from.
        prune (Callable[[SyntaxNode], bool] | None): When it returns True for a
            node, that node is yielded but its children are not visited.

    Yields:
        SyntaxNode: Nodes in document order.
    """
    stack: list[SyntaxNode] = [root]
    while stack:
        node: SyntaxNode = stack.pop()
        yield node
        if prune is not None and prune(node):
            continue
        stack.extend(reversed(node.children))
