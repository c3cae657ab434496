# topmark:header:start
#
#   project      : dfixxer
#   file         : replacements.py
#   file_relpath : src/dfixxer/replacements.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Text replacements and the merge engine.

A [`TextReplacement`][dfixxer.replacements.TextReplacement] targets a half-open
range ``[start, end)`` of the *original* text. Its content is either
[`Literal`][dfixxer.replacements.Literal] (new text) or
[`Unresolved`][dfixxer.replacements.Unresolved] (the original slice, pending a
later pass that may or may not change it). Unresolved replacements never reach
the output as edits: merging copies the original slice for them.

Replacements produced for one text must not overlap. Zero-width replacements
(``start == end``) are insertions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


@dataclass(frozen=True, slots=True)
class Unresolved:
    """Content still equal to the original slice."""


@dataclass(frozen=True, slots=True)
class Literal:
    """Content replaced by ``text``."""

    text: str


ReplacementContent = Union[Unresolved, Literal]


@dataclass(frozen=True, slots=True)
class TextReplacement:
    """An edit of ``[start, end)`` in the original text.

    Attributes:
        start (int): Start character offset in the original text.
        end (int): End character offset (exclusive).
        content (ReplacementContent): New text, or ``Unresolved()``.
        final (bool): Text is fully normalized; later passes must not rescan it.
    """

    start: int
    end: int
    content: ReplacementContent = Unresolved()
    final: bool = False

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid replacement range [{self.start}, {self.end})")

    @classmethod
    def literal(cls, start: int, end: int, text: str, *, final: bool = False) -> TextReplacement:
        """Build a replacement carrying new text."""
        return cls(start, end, Literal(text), final)

    @classmethod
    def unresolved(cls, start: int, end: int) -> TextReplacement:
        """Build a placeholder for ``[start, end)``."""
        return cls(start, end, Unresolved())

    @property
    def text(self) -> str | None:
        """Literal text, or ``None`` when unresolved."""
        match self.content:
            case Literal(text=text):
                return text
            case Unresolved():
                return None

    @property
    def is_resolved(self) -> bool:
        return isinstance(self.content, Literal)

    def resolve(self, original: str) -> str:
        """Return the text this replacement contributes to the output."""
        match self.content:
            case Literal(text=text):
                return text
            case Unresolved():
                return original[self.start : self.end]

    def original_text(self, original: str) -> str:
        return original[self.start : self.end]


@dataclass(frozen=True, slots=True)
class SourceSection:
    """A range of the original text not covered by any replacement."""

    start: int
    end: int


def sort_replacements(replacements: Iterable[TextReplacement]) -> list[TextReplacement]:
    """Return replacements ordered by ``(start, end)``.

    Raises:
        ValueError: If two replacements overlap.
    """
    ordered: list[TextReplacement] = sorted(replacements, key=lambda r: (r.start, r.end))
    last_end = 0
    for replacement in ordered:
        if replacement.start < last_end:
            raise ValueError(
                f"Overlapping replacements at [{replacement.start}, {replacement.end})"
            )
        last_end = replacement.end
    return ordered


def compute_source_sections(
    original: str, replacements: Iterable[TextReplacement]
) -> list[SourceSection]:
    """Return the gaps of ``original`` left uncovered by ``replacements``.

    Gaps and replacement ranges together tile ``[0, len(original))``.

    Args:
        original (str): The original text.
        replacements (Iterable[TextReplacement]): Non-overlapping replacements.

    Returns:
        list[SourceSection]: Non-empty gaps in ascending order.
    """
    sections: list[SourceSection] = []
    last_end = 0
    for replacement in sort_replacements(replacements):
        if last_end < replacement.start:
            sections.append(SourceSection(last_end, replacement.start))
        last_end = max(last_end, replacement.end)
    if last_end < len(original):
        sections.append(SourceSection(last_end, len(original)))
    return sections


def fill_gaps(original: str, replacements: Iterable[TextReplacement]) -> list[TextReplacement]:
    """Return ``replacements`` plus unresolved placeholders for every gap, sorted."""
    ordered: list[TextReplacement] = sort_replacements(replacements)
    filled: list[TextReplacement] = [
        TextReplacement.unresolved(gap.start, gap.end)
        for gap in compute_source_sections(original, ordered)
    ]
    filled.extend(ordered)
    return sort_replacements(filled)


def merge_replacements(original: str, replacements: Iterable[TextReplacement]) -> str:
    """Apply ``replacements`` to ``original`` and return the new text.

    Raises:
        ValueError: If two replacements overlap.
    """
    return "".join(r.resolve(original) for r in fill_gaps(original, replacements))


def get_line_column(source: str, position: int) -> tuple[int, int]:
    """Return the 1-based ``(line, column)`` of ``position`` in ``source``."""
    line: int = source.count("\n", 0, position) + 1
    column: int = position - (source.rfind("\n", 0, position) + 1) + 1
    return line, column


def _lines(text: str) -> list[str]:
    if not text:
        return []
    parts: list[str] = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part.removesuffix("\r") for part in parts]


def render_replacement(original: str, replacement: TextReplacement, index: int) -> str:
    """Render one replacement for the ``check`` report."""
    start_line, start_col = get_line_column(original, replacement.start)
    end_line, end_col = get_line_column(original, replacement.end)
    out: list[str] = [
        f"Replacement {index}:",
        f"  Location: {start_line}:{start_col}-{end_line}:{end_col}",
        "  Original:",
    ]
    out.extend(f"    - {line}" for line in _lines(replacement.original_text(original)))
    out.append("  Replacement:")
    if replacement.text is not None:
        out.extend(f"    + {line}" for line in _lines(replacement.text))
    out.append("")
    return "\n".join(out)


def render_replacements(original: str, replacements: Sequence[TextReplacement]) -> str:
    """Render every resolved replacement, numbered from 1; ``""`` when none."""
    resolved: list[TextReplacement] = [r for r in replacements if r.is_resolved]
    return "\n".join(
        render_replacement(original, replacement, index)
        for index, replacement in enumerate(resolved, start=1)
    )
