# topmark:header:start
#
#   project      : dfixxer
#   file         : utility.py
#   file_relpath : src/dfixxer/transformers/utility.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Helpers shared by the section transformers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dfixxer.constants import UTF8_BOM
from dfixxer.replacements import TextReplacement

if TYPE_CHECKING:
    from dfixxer.config.model import Options


def find_line_start(source: str, position: int) -> int:
    """Return the offset of the first character of the line containing ``position``."""
    return source.rfind("\n", 0, position) + 1


def _is_horizontal_whitespace(text: str) -> bool:
    return all(ch.isspace() and ch not in "\r\n" for ch in text)


def adjust_replacement_for_line_position(
    source: str,
    section_start: int,
    replacement_text: str,
    options: Options,
) -> tuple[int, str]:
    """Anchor a section replacement on its physical line.

    When only indentation precedes the section on its line, the replacement is
    extended back to the line start so the indentation is replaced too. When
    other content precedes it, a line ending is prepended so the section moves
    to its own line. A byte-order mark at the very start of the text is never
    part of the replaced range.

    Args:
        source (str): The original text.
        section_start (int): Offset of the section keyword.
        replacement_text (str): Rendered section text.
        options (Options): Options supplying the line ending.

    Returns:
        tuple[int, str]: The replacement start offset and text.
    """
    line_start: int = find_line_start(source, section_start)
    prefix: str = source[line_start:section_start]
    protected: int = 0
    if line_start == 0 and prefix.startswith(UTF8_BOM):
        prefix = prefix[len(UTF8_BOM) :]
        protected = len(UTF8_BOM)

    if not prefix:
        return section_start, replacement_text
    if _is_horizontal_whitespace(prefix):
        return line_start + protected, replacement_text
    return section_start, options.line_ending_str + replacement_text


def create_text_replacement_if_different(
    source: str,
    start: int,
    end: int,
    text: str,
) -> TextReplacement | None:
    """Return a literal replacement for ``[start, end)``, or ``None`` if ``text`` is unchanged."""
    if source[start:end] == text:
        return None
    return TextReplacement.literal(start, end, text)
