# topmark:header:start
#
#   project      : dfixxer
#   file         : engine.py
#   file_relpath : src/dfixxer/pipeline/engine.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Produce the replacements that format one source text.

Phases, in order:

1. Parse once into sections and contexts.
2. Run the enabled section transformers.
3. Add the inherited-call insertions.
4. Scan every text gap left between those replacements for operator spacing.
5. Keep only real edits, sorted by position.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from dfixxer.config.logging import get_logger
from dfixxer.parsing import parse_source
from dfixxer.replacements import (
    SourceSection,
    TextReplacement,
    compute_source_sections,
    merge_replacements,
    sort_replacements,
)
from dfixxer.text.scanner import apply_text_transformation, apply_text_transformations
from dfixxer.transformers import transform_inherited_calls, transform_section

if TYPE_CHECKING:
    from collections.abc import Callable

    from dfixxer.config.logging import DfixxerLogger
    from dfixxer.config.model import Options
    from dfixxer.parsing.nodes import ParseResult

    from .timing import TimingCollector

logger: DfixxerLogger = get_logger(__name__)

T = TypeVar("T")


def _timed(timing: TimingCollector | None, name: str, operation: Callable[[], T]) -> T:
    return timing.time_operation(name, operation) if timing is not None else operation()


def _section_replacements(
    result: ParseResult, options: Options, source: str
) -> list[TextReplacement]:
    edits: list[TextReplacement] = [
        replacement
        for section in result.code_sections
        if (replacement := transform_section(section, options, source)) is not None
    ]
    if options.transformations.enable_text_transformations:
        # Uses clauses are final; headers, keywords and routine edits get operator spacing.
        edits = apply_text_transformations(
            source, edits, options.text_changes, result.spacing_context
        )
    return edits


def _line_tail(text: str) -> str:
    """Return the part of ``text`` after its last line break."""
    return text[max(text.rfind("\n"), text.rfind("\r")) + 1 :]


def _gap_replacements(
    result: ParseResult, options: Options, source: str, replacements: list[TextReplacement]
) -> list[TextReplacement]:
    gaps: list[SourceSection] = compute_source_sections(source, replacements)
    pieces: list[TextReplacement | SourceSection] = sorted(
        [*replacements, *gaps], key=lambda piece: (piece.start, piece.end)
    )
    edits: list[TextReplacement] = []
    # Output written so far on the current line, so a gap that starts mid-line
    # (for instance right after an insertion) is spaced like the merged text.
    written: str = ""
    for piece in pieces:
        if isinstance(piece, TextReplacement):
            written = _line_tail(written + piece.resolve(source))
            continue
        text: str = source[piece.start : piece.end]
        edit: TextReplacement | None = apply_text_transformation(
            piece.start,
            piece.end,
            text,
            options.text_changes,
            result.spacing_context,
            prefix=written,
        )
        if edit is not None:
            edits.append(edit)
        written = _line_tail(written + (edit.resolve(source) if edit is not None else text))
    return edits


def produce_replacements(
    source: str,
    options: Options,
    *,
    parse: Callable[[str], ParseResult] = parse_source,
    timing: TimingCollector | None = None,
) -> list[TextReplacement]:
    """Compute every edit needed to format ``source``.

    Args:
        source (str): The text to format.
        options (Options): Effective options.
        parse (Callable[[str], ParseResult]): Parser entry point.
        timing (TimingCollector | None): Optional collector for phase durations.

    Returns:
        list[TextReplacement]: Non-overlapping literal edits sorted by ``(start, end)``;
            empty when ``source`` is already formatted.

    Raises:
        ParseError: If ``source`` cannot be parsed at all.
    """
    result: ParseResult = _timed(timing, "parse", lambda: parse(source))
    replacements: list[TextReplacement] = _timed(
        timing, "section transformers", lambda: _section_replacements(result, options, source)
    )
    if options.transformations.enable_inherited_call_expansion:
        replacements.extend(transform_inherited_calls(result.inherited_context))
    if options.transformations.enable_text_transformations:
        replacements.extend(
            _timed(
                timing,
                "text transformations",
                lambda: _gap_replacements(result, options, source, replacements),
            )
        )

    edits: list[TextReplacement] = sort_replacements(
        r for r in replacements if r.is_resolved and r.text != r.original_text(source)
    )
    logger.debug("Produced %d replacement(s)", len(edits))
    return edits


def format_source(
    source: str,
    options: Options,
    *,
    parse: Callable[[str], ParseResult] = parse_source,
) -> str:
    """Return ``source`` formatted according to ``options``."""
    return merge_replacements(source, produce_replacements(source, options, parse=parse))
