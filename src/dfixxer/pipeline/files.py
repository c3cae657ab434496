# topmark:header:start
#
#   project      : dfixxer
#   file         : files.py
#   file_relpath : src/dfixxer/pipeline/files.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""File-level entry points: read, format and write one source file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from dfixxer.config.logging import get_logger
from dfixxer.config.matching import resolve_options_for_file, should_exclude_file
from dfixxer.core.errors import SourceReadError
from dfixxer.replacements import merge_replacements

from .engine import produce_replacements
from .timing import TimingCollector

if TYPE_CHECKING:
    from pathlib import Path

    from dfixxer.config.logging import DfixxerLogger
    from dfixxer.config.model import Options
    from dfixxer.core.diagnostics import DiagnosticLog
    from dfixxer.replacements import TextReplacement

logger: DfixxerLogger = get_logger(__name__)


def read_source(path: Path) -> str:
    """Read ``path`` as UTF-8 without newline translation (a BOM is kept in the text).

    Raises:
        SourceReadError: If the file is not valid UTF-8.
        OSError: If the file cannot be read.
    """
    try:
        with path.open(encoding="utf-8", newline="") as fh:
            return fh.read()
    except UnicodeDecodeError as e:
        raise SourceReadError(f"{path} is not valid UTF-8: {e}") from e


def write_source(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` as UTF-8 without newline translation."""
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(text)


@dataclass(frozen=True, slots=True)
class FileResult:
    """Outcome of processing one file.

    Attributes:
        path (Path): The processed file.
        source (str): Its original text (empty when excluded).
        options (Options): Effective options.
        config_path (Path | None): Configuration the options came from.
        replacements (tuple[TextReplacement, ...]): Edits needed to format the file.
        excluded (bool): The file matched ``exclude_files`` and was not processed.
    """

    path: Path
    source: str
    options: Options
    config_path: Path | None
    replacements: tuple[TextReplacement, ...] = ()
    excluded: bool = False

    @property
    def changed(self) -> bool:
        return bool(self.replacements)

    @property
    def formatted(self) -> str:
        """The formatted text."""
        return merge_replacements(self.source, self.replacements)


def process_file(
    path: Path,
    config_path: Path | None = None,
    diagnostics: DiagnosticLog | None = None,
) -> FileResult:
    """Resolve options for ``path``, read it and compute its replacements.

    Args:
        path (Path): Source file.
        config_path (Path | None): Explicit configuration; discovered when ``None``.
        diagnostics (DiagnosticLog | None): Sink for configuration warnings.

    Returns:
        FileResult: Source, options and replacements.

    Raises:
        ConfigError: If an explicit configuration file cannot be loaded.
        SourceReadError: If the file is not valid UTF-8.
        ParseError: If the file cannot be parsed.
        OSError: If the file cannot be read.
    """
    options, effective_config = resolve_options_for_file(path, config_path, diagnostics)
    if effective_config is not None and should_exclude_file(
        options.exclude_files, path, effective_config
    ):
        return FileResult(path, "", options, effective_config, excluded=True)

    timing = TimingCollector()
    source: str = timing.time_operation("read", lambda: read_source(path))
    replacements: list[TextReplacement] = produce_replacements(source, options, timing=timing)
    timing.log_summary()
    return FileResult(path, source, options, effective_config, tuple(replacements))


def update_file(
    path: Path,
    config_path: Path | None = None,
    diagnostics: DiagnosticLog | None = None,
) -> FileResult:
    """Format ``path`` in place; the file is only written when something changes."""
    result: FileResult = process_file(path, config_path, diagnostics)
    if result.changed:
        write_source(path, result.formatted)
        logger.info("Updated %s (%d replacement(s))", path, len(result.replacements))
    else:
        logger.debug("%s is already formatted", path)
    return result
