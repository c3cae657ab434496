# topmark:header:start
#
#   project      : dfixxer
#   file         : check.py
#   file_relpath : src/dfixxer/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""dfixxer CLI: `check` command.

Reports the edits `update` would make without touching the files. By default
every edit is listed with its position, the original text and the
replacement; ``--diff`` prints a unified diff instead. The command exits with
[`ExitCode.WOULD_CHANGE`][dfixxer.cli.exit_codes.ExitCode] when any file would
change.
"""

from __future__ import annotations

import click

from dfixxer.cli.cmd_common import (
    announce_file,
    get_console,
    report_diagnostics,
    to_config_path,
)
from dfixxer.cli.errors import translate_errors
from dfixxer.cli.exit_codes import ExitCode
from dfixxer.cli.files import expand_filename_pattern
from dfixxer.cli.options import common_config_options, common_file_options
from dfixxer.core.diagnostics import DiagnosticLog
from dfixxer.pipeline import process_file
from dfixxer.replacements import render_replacements
from dfixxer.utils.diff import render_patch, unified_diff


@click.command(
    name="check",
    help="Report the edits formatting would make to FILENAME without changing it.",
)
@common_file_options
@common_config_options
@click.option(
    "--diff",
    "show_diff",
    is_flag=True,
    help="Show a unified diff instead of the list of replacements.",
)
def check_command(filename: str, multi: bool, config_path: str | None, show_diff: bool) -> None:
    """Check each file named by FILENAME; exit with 2 when any would change."""
    ctx: click.Context = click.get_current_context()
    console = get_console()
    diagnostics = DiagnosticLog()
    would_change: int = 0

    for path in expand_filename_pattern(filename, multi=multi):
        if multi:
            announce_file(console, path)
        with translate_errors(path):
            result = process_file(path, to_config_path(config_path), diagnostics)
        if result.excluded or not result.changed:
            continue

        would_change += 1
        if show_diff:
            patch = unified_diff(result.source, result.formatted, str(path))
            console.print(render_patch(patch, color=console.enable_color))
        else:
            console.print(render_replacements(result.source, result.replacements))

    report_diagnostics(console, diagnostics)
    if would_change:
        console.print(
            console.styled(f"{would_change} file(s) would be reformatted.", fg="yellow", bold=True)
        )
        ctx.exit(ExitCode.WOULD_CHANGE)
