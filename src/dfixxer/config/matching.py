# topmark:header:start
#
#   project      : dfixxer
#   file         : matching.py
#   file_relpath : src/dfixxer/config/matching.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""File selection against configuration patterns.

Patterns in ``exclude_files`` and ``custom_config_patterns`` are gitignore-style
globs (``pathspec`` gitwildmatch) evaluated relative to the directory holding
the configuration file. Backslashes are treated as path separators so that
Windows-style paths match the same patterns.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from dfixxer.config.io.loaders import load_options, load_or_default
from dfixxer.config.logging import get_logger
from dfixxer.config.paths import find_config_for_file

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dfixxer.config.logging import DfixxerLogger
    from dfixxer.config.model import Options
    from dfixxer.core.diagnostics import DiagnosticLog

logger: DfixxerLogger = get_logger(__name__)


def _relative_posix(file_path: Path, config_path: Path) -> str:
    raw: str = str(file_path).replace("\\", "/")
    config_dir: Path = config_path.parent.resolve()
    try:
        return Path(raw).resolve().relative_to(config_dir).as_posix()
    except ValueError:
        return Path(raw).as_posix()


def match_file_patterns(
    patterns: Iterable[str],
    file_path: Path,
    config_path: Path,
) -> str | None:
    """Return the first pattern matching ``file_path``.

    Args:
        patterns (Iterable[str]): Gitignore-style glob patterns.
        file_path (Path): File to test; it is made relative to the
            configuration directory when possible.
        config_path (Path): Configuration file the patterns come from.

    Returns:
        str | None: The matching pattern, or ``None``.
    """
    rel: str = _relative_posix(file_path, config_path)
    for pattern in patterns:
        try:
            spec: PathSpec = PathSpec.from_lines(GitWildMatchPattern, [pattern])
        except (ValueError, re.error) as e:
            logger.warning("Ignoring invalid file pattern %r: %s", pattern, e)
            continue
        if spec.match_file(rel):
            logger.trace("Pattern %r matches %s", pattern, rel)
            return pattern
    return None


def should_exclude_file(exclude_patterns: Iterable[str], file_path: Path, config_path: Path) -> bool:
    """Return True when ``file_path`` matches one of ``exclude_patterns``."""
    pattern: str | None = match_file_patterns(exclude_patterns, file_path, config_path)
    if pattern is None:
        return False
    logger.info("Excluding %s (matches %r)", file_path, pattern)
    return True


def find_custom_config_for_file(
    custom_patterns: Iterable[tuple[str, str]],
    file_path: Path,
    config_path: Path,
) -> Path | None:
    """Return the custom configuration that applies to ``file_path``.

    Relative configuration paths are resolved against the directory of
    ``config_path``; absolute ones are returned unchanged.

    Args:
        custom_patterns (Iterable[tuple[str, str]]): ``(glob, config path)`` pairs.
        file_path (Path): File to test.
        config_path (Path): Configuration file declaring the pairs.

    Returns:
        Path | None: The first matching configuration path, or ``None``.
    """
    for pattern, custom in custom_patterns:
        if match_file_patterns([pattern], file_path, config_path) is None:
            continue
        custom_path = Path(custom)
        resolved: Path = custom_path if custom_path.is_absolute() else config_path.parent / custom_path
        logger.info("Using custom configuration %s for %s", resolved, file_path)
        return resolved
    return None


def resolve_options_for_file(
    file_path: Path,
    config_path: Path | None = None,
    diagnostics: DiagnosticLog | None = None,
) -> tuple[Options, Path | None]:
    """Resolve the effective options for ``file_path``.

    The base configuration is ``config_path`` when given, otherwise the nearest
    discovered ``dfixxer.toml``. When a ``custom_config_patterns`` entry of the
    base configuration matches, the referenced configuration replaces it.
    Discovered and custom configurations fall back to defaults when unreadable.

    Returns:
        tuple[Options, Path | None]: Effective options and the configuration file
            they were read from (``None`` for built-in defaults).

    Raises:
        ConfigError: If the explicit ``config_path`` cannot be loaded.
    """
    if config_path is not None:
        base_path: Path | None = config_path
        options: Options = load_options(config_path, diagnostics)
    else:
        base_path = find_config_for_file(file_path)
        options = load_or_default(base_path, diagnostics)
    if base_path is None:
        return options, None
    custom: Path | None = find_custom_config_for_file(
        options.custom_config_patterns, file_path, base_path
    )
    if custom is None:
        return options, base_path
    return load_or_default(custom, diagnostics), custom
