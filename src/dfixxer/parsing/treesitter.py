# topmark:header:start
#
#   project      : dfixxer
#   file         : treesitter.py
#   file_relpath : src/dfixxer/parsing/treesitter.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Adapter around the tree-sitter Pascal grammar.

The grammar comes from ``tree-sitter-language-pack``. The tree-sitter tree is
converted eagerly into [`TreeNode`][dfixxer.parsing.tree.TreeNode]s so the rest
of the package never touches tree-sitter objects, and so offsets are ``str``
indices rather than UTF-8 byte offsets.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Any

from tree_sitter_language_pack import get_parser

from dfixxer.config.logging import get_logger
from dfixxer.constants import PASCAL_LANGUAGE_NAME
from dfixxer.core.errors import ParseError
from dfixxer.parsing.tree import TreeNode

if TYPE_CHECKING:
    from tree_sitter import Node, Parser

    from dfixxer.config.logging import DfixxerLogger

logger: DfixxerLogger = get_logger(__name__)


@lru_cache(maxsize=1)
def _get_parser() -> Parser:
    # Grammar loading may download the grammar and fail with library-specific errors.
    try:
        return get_parser(PASCAL_LANGUAGE_NAME)
    except Exception as e:
        raise ParseError(f"Failed to load the {PASCAL_LANGUAGE_NAME} grammar: {e}") from e


class _OffsetMap:
    """Maps UTF-8 byte offsets and tree-sitter rows back to ``str`` offsets."""

    def __init__(self, source: str, encoded: bytes) -> None:
        self._identity: bool = len(encoded) == len(source)
        self._byte_to_char: list[int] = []
        if not self._identity:
            table: list[int] = [0] * (len(encoded) + 1)
            byte_pos = 0
            for char_pos, ch in enumerate(source):
                width = len(ch.encode("utf-8"))
                for k in range(width):
                    table[byte_pos + k] = char_pos
                byte_pos += width
            table[byte_pos] = len(source)
            self._byte_to_char = table
        self._line_starts: list[int] = [0]
        for index, ch in enumerate(source):
            if ch == "\n":
                self._line_starts.append(index + 1)

    def char(self, byte_offset: int) -> int:
        return byte_offset if self._identity else self._byte_to_char[byte_offset]

    def point(self, row: int, char_offset: int) -> tuple[int, int]:
        line_start: int = self._line_starts[row] if row < len(self._line_starts) else 0
        return row, char_offset - line_start


def _convert_node(node: Node, offsets: _OffsetMap, field_name: str | None) -> TreeNode:
    start: int = offsets.char(node.start_byte)
    end: int = offsets.char(node.end_byte)
    return TreeNode(
        kind=node.type,
        start=start,
        end=end,
        start_point=offsets.point(node.start_point[0], start),
        end_point=offsets.point(node.end_point[0], end),
        has_error=node.has_error,
        field_name=field_name,
    )


def parse_tree(source: str) -> TreeNode:
    """Parse ``source`` with the Pascal grammar.

    Args:
        source (str): Pascal/Delphi source text.

    Returns:
        TreeNode: Root of the converted syntax tree.

    Raises:
        ParseError: If the grammar cannot be loaded or parsing fails.
    """
    parser: Parser = _get_parser()
    encoded: bytes = source.encode("utf-8")
    try:
        tree: Any = parser.parse(encoded)
    except (ValueError, RuntimeError) as e:
        raise ParseError(f"Failed to parse source: {e}") from e
    if tree is None:
        raise ParseError("Failed to parse source")

    offsets = _OffsetMap(source, encoded)
    root: TreeNode = _convert_node(tree.root_node, offsets, None)
    stack: list[tuple[Node, TreeNode]] = [(tree.root_node, root)]
    while stack:
        ts_node, converted = stack.pop()
        for index, ts_child in enumerate(ts_node.children):
            child: TreeNode = _convert_node(ts_child, offsets, ts_node.field_name_for_child(index))
            converted.attach(child)
            stack.append((ts_child, child))
    if root.has_error:
        logger.info("Source contains parse errors; affected sections are left untouched")
    return root


def render_tree(root: TreeNode, source: str) -> str:
    """Render the syntax tree below ``root``, one node per line.

    Each line reads ``Node kind: <kind> | Text: <text>`` (plus ``| ERROR`` when
    the subtree has an error), indented two spaces per depth level.
    """
    lines: list[str] = []
    stack: list[tuple[TreeNode, int]] = [(child, 0) for child in reversed(root.children)]
    while stack:
        node, depth = stack.pop()
        error: str = " | ERROR" if node.has_error else ""
        lines.append(f"{'  ' * depth}Node kind: {node.kind} | Text: {node.text(source)}{error}")
        stack.extend((child, depth + 1) for child in reversed(node.children))
    return "\n".join(lines)
