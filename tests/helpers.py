# topmark:header:start
#
#   project      : dfixxer
#   file         : helpers.py
#   file_relpath : tests/helpers.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Hand-built syntax trees for tests that do not load the Pascal grammar.

[`build_tree`][tests.helpers.build_tree] recognizes just enough Pascal to drive
the extractor: ``uses`` clauses, ``unit``/``program`` headers, the four
single-keyword sections and routine declarations. Node kinds follow the
tree-sitter Pascal grammar so the real extractor code runs unchanged.
"""

from __future__ import annotations

import re
from typing import Final

from dfixxer.parsing import ParseResult, analyze_tree
from dfixxer.parsing.tree import TreeNode

TOKEN_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    (?P<pp>\{\$[^}]*\})
    | (?P<comment>\{[^}]*\}|//[^\r\n]*|\(\*.*?\*\))
    | (?P<string>'(?:[^'\r\n]|'')*')
    | (?P<word>[A-Za-z_]\w*(?:\.[A-Za-z_]\w*)*)
    | (?P<punct>[;,()])
    """,
    re.VERBOSE | re.DOTALL,
)

SINGLE_KEYWORDS: Final[dict[str, str]] = {
    "interface": "kInterface",
    "implementation": "kImplementation",
    "initialization": "kInitialization",
    "finalization": "kFinalization",
}

ROUTINE_KEYWORDS: Final[dict[str, str]] = {
    "procedure": "kProcedure",
    "function": "kFunction",
    "constructor": "kConstructor",
    "destructor": "kDestructor",
}


def point(source: str, offset: int) -> tuple[int, int]:
    """Return the 0-based ``(row, column)`` of ``offset``."""
    row: int = source.count("\n", 0, offset)
    return row, offset - (source.rfind("\n", 0, offset) + 1)


def node(
    source: str,
    kind: str,
    start: int,
    end: int,
    children: list[TreeNode] | None = None,
    *,
    field: str | None = None,
    has_error: bool = False,
) -> TreeNode:
    """Build a node with points computed from ``source``."""
    return TreeNode.build(
        kind,
        start,
        end,
        children or [],
        has_error=has_error,
        field=field,
        start_point=point(source, start),
        end_point=point(source, end),
    )


def _tokens(source: str) -> list[tuple[str, str, int, int]]:
    out: list[tuple[str, str, int, int]] = []
    for m in TOKEN_RE.finditer(source):
        group: str = m.lastgroup or ""
        out.append((group, m.group(), m.start(), m.end()))
    return out


def build_tree(source: str) -> TreeNode:
    """Build a syntax tree for the constructs listed in the module docstring."""
    tokens = _tokens(source)
    children: list[TreeNode] = []
    i = 0
    while i < len(tokens):
        group, text, start, end = tokens[i]
        word: str = text.lower() if group == "word" else ""
        if word == "uses":
            parts: list[TreeNode] = [node(source, "kUses", start, end)]
            i += 1
            clause_end = end
            while i < len(tokens):
                g, t, s, e = tokens[i]
                i += 1
                clause_end = e
                if g == "word":
                    parts.append(node(source, "moduleName", s, e))
                elif g in ("comment", "pp"):
                    parts.append(node(source, g, s, e))
                elif t in (",", ";"):
                    parts.append(node(source, t, s, e))
                    if t == ";":
                        break
            children.append(node(source, "declUses", start, clause_end, parts))
            continue
        if word in ("unit", "program") and i + 2 < len(tokens):
            name, semi = tokens[i + 1], tokens[i + 2]
            children.append(
                node(
                    source,
                    word,
                    start,
                    semi[3],
                    [
                        node(source, "k" + word.capitalize(), start, end),
                        node(source, "moduleName", name[2], name[3]),
                        node(source, ";", semi[2], semi[3]),
                    ],
                )
            )
            i += 3
            continue
        if word in SINGLE_KEYWORDS:
            children.append(node(source, SINGLE_KEYWORDS[word], start, end))
            i += 1
            continue
        if word in ROUTINE_KEYWORDS and i + 1 < len(tokens):
            parts = [node(source, ROUTINE_KEYWORDS[word], start, end)]
            _, name_text, name_start, name_end = tokens[i + 1]
            if "." in name_text:
                segments: list[TreeNode] = []
                offset = name_start
                for segment in name_text.split("."):
                    segments.append(node(source, "identifier", offset, offset + len(segment)))
                    offset += len(segment) + 1
                parts.append(node(source, "genericDot", name_start, name_end, segments))
            else:
                parts.append(node(source, "identifier", name_start, name_end))
            i += 2
            decl_end = name_end
            while i < len(tokens):
                g, t, s, e = tokens[i]
                i += 1
                decl_end = e
                if t == "(":
                    close = next(k for k in range(i, len(tokens)) if tokens[k][1] == ")")
                    parts.append(node(source, "declArgs", s, tokens[close][3]))
                    i = close + 1
                elif t == ";":
                    parts.append(node(source, ";", s, e))
                    break
            children.append(node(source, "declProc", start, decl_end, parts))
            continue
        i += 1
    return node(source, "root", 0, len(source), children)


def parse_with_helpers(source: str) -> ParseResult:
    """Drop-in replacement for ``parse_source`` built on [`build_tree`][tests.helpers.build_tree]."""
    return analyze_tree(build_tree(source), source)
