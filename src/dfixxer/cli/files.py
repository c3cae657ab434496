# topmark:header:start
#
#   project      : dfixxer
#   file         : files.py
#   file_relpath : src/dfixxer/cli/files.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Expansion of the FILENAME argument into concrete input files."""

from __future__ import annotations

import glob
from pathlib import Path
from typing import TYPE_CHECKING

from dfixxer.cli.errors import DfixxerFileNotFoundError, DfixxerUsageError
from dfixxer.config.logging import get_logger

if TYPE_CHECKING:
    from dfixxer.config.logging import DfixxerLogger

logger: DfixxerLogger = get_logger(__name__)


def expand_filename_pattern(filename: str, *, multi: bool) -> list[Path]:
    """Return the files named by ``filename``.

    Without ``multi`` the argument is a single path and is returned as is (the
    caller reports a missing file). With ``multi`` it is a glob pattern, ``**``
    included; matches are sorted and directories are skipped.

    Args:
        filename (str): Path or glob pattern.
        multi (bool): Treat ``filename`` as a glob pattern.

    Returns:
        list[Path]: Files to process.

    Raises:
        DfixxerUsageError: If ``filename`` is empty.
        DfixxerFileNotFoundError: If the pattern matches no file.
    """
    if not filename.strip():
        raise DfixxerUsageError("FILENAME must not be empty.")
    if not multi:
        return [Path(filename)]

    matches: list[Path] = [
        Path(m) for m in sorted(glob.glob(filename, recursive=True)) if Path(m).is_file()
    ]
    logger.debug("Pattern %r matched %d file(s)", filename, len(matches))
    if not matches:
        raise DfixxerFileNotFoundError(f"No files match pattern: {filename}")
    return matches
