# topmark:header:start
#
#   project      : dfixxer
#   file         : diff.py
#   file_relpath : src/dfixxer/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Unified-diff helpers for previewing formatting changes."""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Sequence


def unified_diff(original: str, updated: str, path: str) -> list[str]:
    """Return the unified diff between two texts as a list of lines.

    Line endings are kept in the compared lines so that CRLF/LF changes and
    trailing-whitespace changes are visible.

    Args:
        original (str): Text before formatting.
        updated (str): Text after formatting.
        path (str): File name used in the ``---``/``+++`` headers.

    Returns:
        list[str]: Diff lines without trailing newlines; empty when the texts are equal.
    """
    diff = difflib.unified_diff(
        original.splitlines(keepends=True),
        updated.splitlines(keepends=True),
        fromfile=f"{path} (original)",
        tofile=f"{path} (formatted)",
        lineterm="",
    )
    return [line.rstrip("\n") for line in diff]


def render_patch(patch: Sequence[str] | str, *, color: bool = True) -> str:
    """Render a unified diff for the terminal.

    Control characters are shown explicitly (``\\r``, ``\\n``). With ``color``,
    removed lines are red, added lines green and hunk headers cyan.

    Args:
        patch (Sequence[str] | str): Diff lines, or the diff as one string.
        color (bool): Whether to emit ANSI colors.

    Returns:
        str: The rendered diff, one line per diff line.
    """
    lines: list[str] = patch.splitlines() if isinstance(patch, str) else list(patch)

    def process_line(line: str) -> str:
        content: str = line.replace("\r", "\\r").replace("\n", "\\n")
        if not color:
            return content
        if line.startswith(("---", "+++")):
            return chalk.bold(content)
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return content

    return "".join(f"{process_line(line)}\n" for line in lines)
