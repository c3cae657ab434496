# topmark:header:start
#
#   project      : dfixxer
#   file         : paths.py
#   file_relpath : src/dfixxer/config/paths.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Configuration file discovery.

A source file is governed by the nearest ``dfixxer.toml`` found in its own
directory or any ancestor directory.
"""

from __future__ import annotations

from pathlib import Path

from dfixxer.config.logging import DfixxerLogger, get_logger
from dfixxer.constants import CONFIG_FILE_NAME

logger: DfixxerLogger = get_logger(__name__)


def find_config_for_file(path: Path) -> Path | None:
    """Return the nearest ``dfixxer.toml`` governing ``path``.

    The search starts in the directory containing ``path`` and walks upward to
    the filesystem root.

    Args:
        path (Path): Source file (need not exist).

    Returns:
        Path | None: The first regular ``dfixxer.toml`` found, or ``None``.
    """
    start: Path = path.resolve().parent
    for directory in (start, *start.parents):
        candidate: Path = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            logger.debug("Found configuration %s for %s", candidate, path)
            return candidate
    logger.debug("No %s found for %s", CONFIG_FILE_NAME, path)
    return None
