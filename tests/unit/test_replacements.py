# topmark:header:start
#
#   project      : dfixxer
#   file         : test_replacements.py
#   file_relpath : tests/unit/test_replacements.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Replacement records, gap computation, merging and the ``check`` report."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dfixxer.replacements import (
    SourceSection,
    TextReplacement,
    compute_source_sections,
    fill_gaps,
    get_line_column,
    merge_replacements,
    render_replacements,
    sort_replacements,
)


def test_invalid_range_is_rejected() -> None:
    """``end`` before ``start`` is a programming error."""
    with pytest.raises(ValueError, match="Invalid replacement range"):
        TextReplacement.literal(5, 3, "x")


def test_unresolved_resolves_to_original_slice() -> None:
    """A placeholder contributes the original text of its range."""
    replacement = TextReplacement.unresolved(2, 5)
    assert not replacement.is_resolved
    assert replacement.text is None
    assert replacement.resolve("abcdefg") == "cde"


def test_sort_rejects_overlaps() -> None:
    """Overlapping edits cannot be merged."""
    with pytest.raises(ValueError, match="Overlapping"):
        sort_replacements([TextReplacement.literal(0, 4, "x"), TextReplacement.literal(3, 6, "y")])


def test_sort_orders_zero_width_before_following_edit() -> None:
    """An insertion at an edit's start sorts first and does not overlap it."""
    insert = TextReplacement.literal(3, 3, "()")
    edit = TextReplacement.literal(3, 5, "zz")
    assert sort_replacements([edit, insert]) == [insert, edit]


def test_compute_source_sections() -> None:
    """Gaps cover exactly what the replacements leave uncovered."""
    original = "0123456789"
    gaps = compute_source_sections(
        original, [TextReplacement.literal(2, 4, "x"), TextReplacement.literal(7, 7, "y")]
    )
    assert gaps == [SourceSection(0, 2), SourceSection(4, 7), SourceSection(7, 10)]


def test_merge_replacements() -> None:
    """Edits are spliced in; insertions land at their offset."""
    original = "procedure Foo;"
    merged = merge_replacements(
        original,
        [TextReplacement.literal(13, 13, "()"), TextReplacement.literal(0, 9, "PROCEDURE")],
    )
    assert merged == "PROCEDURE Foo();"


def test_merge_without_replacements_is_identity() -> None:
    """No edits, no change."""
    assert merge_replacements("unit A;\n", []) == "unit A;\n"


@st.composite
def _text_and_edits(draw: st.DrawFn) -> tuple[str, list[TextReplacement]]:
    text: str = draw(st.text(alphabet="ab;\n ", max_size=40))
    cuts: list[int] = sorted(draw(st.lists(st.integers(0, len(text)), max_size=8)))
    edits: list[TextReplacement] = []
    for start, end in zip(cuts[::2], cuts[1::2]):
        edits.append(TextReplacement.literal(start, end, draw(st.text(alphabet="xy", max_size=3))))
    return text, edits


@given(_text_and_edits())
def test_gaps_and_edits_tile_the_text(case: tuple[str, list[TextReplacement]]) -> None:
    """Filled replacements are contiguous and cover ``[0, len(text))``."""
    text, edits = case
    filled = fill_gaps(text, edits)
    position = 0
    for replacement in filled:
        assert replacement.start == position
        position = replacement.end
    assert position == len(text)


def test_get_line_column_is_one_based() -> None:
    """Lines and columns are counted from 1."""
    source = "ab\ncd"
    assert get_line_column(source, 0) == (1, 1)
    assert get_line_column(source, 4) == (2, 2)
    assert get_line_column(source, 5) == (2, 3)


def test_render_replacements() -> None:
    """Every resolved edit is numbered with its location, old and new lines."""
    original = "uses B, A;\n"
    rendered = render_replacements(
        original, [TextReplacement.literal(0, 10, "uses\n  A,\n  B;", final=True)]
    )
    assert rendered.splitlines() == [
        "Replacement 1:",
        "  Location: 1:1-1:11",
        "  Original:",
        "    - uses B, A;",
        "  Replacement:",
        "    + uses",
        "    +   A,",
        "    +   B;",
    ]


def test_render_replacements_skips_unresolved() -> None:
    """Placeholders are not part of the report."""
    assert render_replacements("abc", [TextReplacement.unresolved(0, 3)]) == ""
