# topmark:header:start
#
#   project      : dfixxer
#   file         : scanner.py
#   file_relpath : src/dfixxer/text/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Operator-spacing scanner.

The scanner walks text with a small state machine so that string literals and
comments are never modified:

- ``CODE``: operators are spaced according to the configured policies.
- ``STRING``: ``'...'``; ``''`` is an escaped quote; a line break ends an
  unterminated literal.
- ``LINE_COMMENT``: ``//`` up to the line break.
- ``BRACE_COMMENT``: ``{ ... }``.
- ``PAREN_STAR_COMMENT``: ``(* ... *)``.

Output is buffered one physical line at a time. Whitespace edits around an
operator only ever touch the current line, and trailing whitespace is trimmed
when the line is flushed (in every state).

A slice that starts mid-line can be given the text already written before it on
that line as ``prefix``. The prefix is consulted (previous character, blank
line checks) but never emitted or modified.

When a [`SpacingContext`][dfixxer.parsing.contexts.SpacingContext] is supplied,
positions are looked up as ``base + index`` so that a slice of the original
text can be scanned with the context of the whole file.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING, Final

from dfixxer.config.logging import get_logger
from dfixxer.config.model import OperatorClass, SpaceOperation
from dfixxer.replacements import Literal, TextReplacement, Unresolved

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dfixxer.config.logging import DfixxerLogger
    from dfixxer.config.model import TextChangeOptions
    from dfixxer.parsing.contexts import SpacingContext

logger: DfixxerLogger = get_logger(__name__)

# Longest match first.
TWO_CHAR_OPERATORS: Final[tuple[str, ...]] = (":=", "+=", "-=", "*=", "/=", "<=", ">=", "<>")
ONE_CHAR_OPERATORS: Final[frozenset[str]] = frozenset(":+-*/<>=,;")

COMPARISON_TOKENS: Final[frozenset[str]] = frozenset({"<", "<=", "<>", ">", ">="})
SIGN_TOKENS: Final[frozenset[str]] = frozenset({"+", "-"})

# A sign following one of these is a prefix sign, not a binary operator.
UNARY_PRECEDERS: Final[frozenset[str]] = frozenset("([,;:=<>+-*/")

HORIZONTAL_WS: Final[str] = " \t"
LINE_BREAKS: Final[str] = "\r\n"


class _State(Enum):
    CODE = auto()
    STRING = auto()
    LINE_COMMENT = auto()
    BRACE_COMMENT = auto()
    PAREN_STAR_COMMENT = auto()


class _Spacing(Enum):
    """Resolved treatment of one operator occurrence."""

    POLICY = auto()
    UNTOUCHED = auto()
    PREFIX_SIGN = auto()
    GENERIC_OPEN = auto()
    GENERIC_CLOSE = auto()


def _is_ident_char(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch in "_.")


def _is_exponent_sign(text: str, index: int) -> bool:
    """Whether the sign at ``index`` sits inside a float literal like ``1.5e-3``."""
    if index + 1 >= len(text) or not text[index + 1].isdigit():
        return False
    start: int = index
    while start > 0 and _is_ident_char(text[start - 1]):
        start -= 1
    token: str = text[start:index]
    return bool(token) and token[0].isdigit() and token[-1] in "eE"


class _Scanner:
    def __init__(
        self,
        text: str,
        options: TextChangeOptions,
        context: SpacingContext | None,
        base: int,
        prefix: str = "",
    ) -> None:
        self.text: str = text
        self.options: TextChangeOptions = options
        self.context: SpacingContext | None = context
        self.base: int = base
        self.out: list[str] = []
        self.line: list[str] = list(prefix)
        # Characters at the head of `line` that belong to the prefix.
        self.fixed: int = len(prefix)

    # --- line buffer ---

    def flush_line(self, newline: str = "") -> None:
        chunk: str = "".join(self.line[self.fixed :])
        if self.options.trim_trailing_whitespace:
            chunk = chunk.rstrip()
        self.out.append(chunk)
        self.out.append(newline)
        self.line.clear()
        self.fixed = 0

    def line_is_blank(self) -> bool:
        return all(ch in HORIZONTAL_WS for ch in self.line)

    def previous_non_blank(self) -> str | None:
        for ch in reversed(self.line):
            if ch not in HORIZONTAL_WS:
                return ch
        return None

    def strip_before(self) -> None:
        if self.line_is_blank():
            return
        while len(self.line) > self.fixed and self.line[-1] in HORIZONTAL_WS:
            self.line.pop()

    def space_before(self, token: str) -> None:
        if self.line_is_blank():
            return
        self.strip_before()
        last: str = self.line[-1]
        if last not in HORIZONTAL_WS and last != token[0]:
            self.line.append(" ")

    def after_operator(self, index: int, token: str, *, add_space: bool) -> int:
        """Normalize the whitespace following an operator ending before ``index``.

        Returns the index of the next character to scan.
        """
        j: int = index
        while j < len(self.text) and self.text[j] in HORIZONTAL_WS:
            j += 1
        if j >= len(self.text) or self.text[j] in LINE_BREAKS:
            return index
        if add_space and self.text[j] == token[-1]:
            return index
        if add_space:
            self.line.append(" ")
        return j

    # --- classification ---

    def match_operator(self, index: int) -> str | None:
        pair: str = self.text[index : index + 2]
        if pair in TWO_CHAR_OPERATORS:
            return pair
        ch: str = self.text[index]
        return ch if ch in ONE_CHAR_OPERATORS else None

    def classify(self, index: int, token: str) -> _Spacing:
        pos: int = self.base + index
        ctx: SpacingContext | None = self.context
        if token in SIGN_TOKENS:
            if (ctx is not None and pos in ctx.exponent_sign_positions) or _is_exponent_sign(
                self.text, index
            ):
                return _Spacing.UNTOUCHED
            if (ctx is not None and ctx.is_unary_sign(pos)) or self.previous_non_blank() in (
                UNARY_PRECEDERS
            ):
                return _Spacing.PREFIX_SIGN
            return _Spacing.POLICY
        if token == ":" and self.options.colon_numeric_exception:
            before: str = self.text[index - 1] if index > 0 else "".join(self.line[-1:])
            after: str = self.text[index + 1] if index + 1 < len(self.text) else ""
            if before.isdigit() and after.isdigit():
                return _Spacing.UNTOUCHED
            return _Spacing.POLICY
        if token in COMPARISON_TOKENS and ctx is not None:
            if pos in ctx.generic_angle_positions:
                if token == "<":
                    return _Spacing.GENERIC_OPEN
                if token == ">":
                    return _Spacing.GENERIC_CLOSE
            if not ctx.is_binary_comparison(pos):
                return _Spacing.UNTOUCHED
        return _Spacing.POLICY

    def emit_operator(self, index: int, token: str) -> int:
        end: int = index + len(token)
        spacing: _Spacing = self.classify(index, token)
        match spacing:
            case _Spacing.UNTOUCHED:
                self.line.extend(token)
                return end
            case _Spacing.PREFIX_SIGN:
                self.line.extend(token)
                return self.after_operator(end, token, add_space=False)
            case _Spacing.GENERIC_OPEN:
                self.strip_before()
                self.line.extend(token)
                return self.after_operator(end, token, add_space=False)
            case _Spacing.GENERIC_CLOSE:
                self.strip_before()
                self.line.extend(token)
                return end
            case _Spacing.POLICY:
                op: OperatorClass | None = OperatorClass.from_token(token)
                policy: SpaceOperation = (
                    self.options.policy(op) if op is not None else SpaceOperation.NO_CHANGE
                )
                if policy.spaces_before:
                    self.space_before(token)
                self.line.extend(token)
                if policy.spaces_after:
                    return self.after_operator(end, token, add_space=True)
                return end

    # --- main loop ---

    def run(self) -> str:
        text: str = self.text
        state: _State = _State.CODE
        i = 0
        while i < len(text):
            ch: str = text[i]
            if ch in LINE_BREAKS:
                self.flush_line(ch)
                if state in (_State.STRING, _State.LINE_COMMENT):
                    state = _State.CODE
                i += 1
                continue
            match state:
                case _State.CODE:
                    if ch == "'":
                        state = _State.STRING
                    elif ch == "{":
                        state = _State.BRACE_COMMENT
                    elif text.startswith("(*", i):
                        self.line.extend("(*")
                        state = _State.PAREN_STAR_COMMENT
                        i += 2
                        continue
                    elif text.startswith("//", i):
                        self.line.extend("//")
                        state = _State.LINE_COMMENT
                        i += 2
                        continue
                    else:
                        token: str | None = self.match_operator(i)
                        if token is not None:
                            i = self.emit_operator(i, token)
                            continue
                    self.line.append(ch)
                case _State.STRING:
                    self.line.append(ch)
                    if ch == "'":
                        if text.startswith("''", i):
                            self.line.append("'")
                            i += 1
                        else:
                            state = _State.CODE
                case _State.LINE_COMMENT:
                    self.line.append(ch)
                case _State.BRACE_COMMENT:
                    self.line.append(ch)
                    if ch == "}":
                        state = _State.CODE
                case _State.PAREN_STAR_COMMENT:
                    if text.startswith("*)", i):
                        self.line.extend("*)")
                        state = _State.CODE
                        i += 2
                        continue
                    self.line.append(ch)
            i += 1
        if self.line:
            self.flush_line()
        return "".join(self.out)


def apply_text_changes(
    text: str,
    options: TextChangeOptions,
    context: SpacingContext | None = None,
    base: int = 0,
    *,
    prefix: str = "",
) -> str:
    """Apply operator spacing and trailing-whitespace trimming to ``text``.

    Args:
        text (str): Text to rewrite.
        options (TextChangeOptions): Spacing policies and trimming switch.
        context (SpacingContext | None): Operator classifications from the syntax
            tree; lexical heuristics are used when omitted.
        base (int): Offset of ``text`` within the text the context was built from.
        prefix (str): Output already written on the line where ``text`` starts;
            read for spacing decisions, never part of the result.

    Returns:
        str: The rewritten text (equal to ``text`` when nothing applies).
    """
    return _Scanner(text, options, context, base, prefix).run()


def apply_text_transformation(
    start: int,
    end: int,
    text: str,
    options: TextChangeOptions,
    context: SpacingContext | None = None,
    *,
    prefix: str = "",
) -> TextReplacement | None:
    """Scan ``text`` (the slice ``[start, end)``) and return an edit if it changed."""
    changed: str = apply_text_changes(text, options, context, start, prefix=prefix)
    if changed == text:
        return None
    return TextReplacement.literal(start, end, changed)


def apply_text_transformations(
    original: str,
    replacements: Iterable[TextReplacement],
    options: TextChangeOptions,
    context: SpacingContext | None = None,
) -> list[TextReplacement]:
    """Run the scanner over existing replacements.

    Final replacements pass through untouched. Literal text is rescanned
    without context (its offsets no longer match the original). Unresolved
    replacements are scanned over their original slice and become literal only
    when the scan changes them.

    Args:
        original (str): The original text.
        replacements (Iterable[TextReplacement]): Replacements to refine.
        options (TextChangeOptions): Scanner options.
        context (SpacingContext | None): Context of ``original``.

    Returns:
        list[TextReplacement]: Refined replacements, in input order.
    """
    refined: list[TextReplacement] = []
    for replacement in replacements:
        if replacement.final:
            refined.append(replacement)
            continue
        match replacement.content:
            case Literal(text=text):
                refined.append(
                    TextReplacement.literal(
                        replacement.start, replacement.end, apply_text_changes(text, options)
                    )
                )
            case Unresolved():
                changed: TextReplacement | None = apply_text_transformation(
                    replacement.start,
                    replacement.end,
                    replacement.original_text(original),
                    options,
                    context,
                )
                refined.append(changed if changed is not None else replacement)
    return refined
