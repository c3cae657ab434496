# topmark:header:start
#
#   project      : dfixxer
#   file         : cmd_common.py
#   file_relpath : src/dfixxer/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Helpers shared by the dfixxer subcommands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from dfixxer.cli.console import ClickConsole
    from dfixxer.core.diagnostics import DiagnosticLog


def get_console() -> ClickConsole:
    """Return the console stored on the current Click context by the root group."""
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def to_config_path(config_path: str | None) -> Path | None:
    """Convert the ``--config`` value into a ``Path`` (``None`` when not given)."""
    return Path(config_path) if config_path else None


def announce_file(console: ClickConsole, path: Path) -> None:
    """Print the file header used when several files are processed."""
    console.print(f"Processing file: {path.resolve()}")


def report_diagnostics(console: ClickConsole, diagnostics: DiagnosticLog) -> None:
    """Replay collected diagnostics on stderr."""
    for diagnostic in diagnostics:
        console.warn(diagnostic.render())
