# topmark:header:start
#
#   project      : dfixxer
#   file         : update.py
#   file_relpath : src/dfixxer/cli/commands/update.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""dfixxer CLI: `update` command.

Formats Pascal/Delphi sources in place. Files that match ``exclude_files`` in
their configuration are skipped, and a file is only rewritten when formatting
changes it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dfixxer.cli.cmd_common import get_console, report_diagnostics, to_config_path
from dfixxer.cli.errors import translate_errors
from dfixxer.cli.files import expand_filename_pattern
from dfixxer.cli.options import common_config_options, common_file_options
from dfixxer.config.logging import get_logger
from dfixxer.core.diagnostics import DiagnosticLog
from dfixxer.pipeline import update_file

if TYPE_CHECKING:
    from dfixxer.config.logging import DfixxerLogger

logger: DfixxerLogger = get_logger(__name__)


@click.command(
    name="update",
    help="Format FILENAME in place (a glob pattern with --multi).",
)
@common_file_options
@common_config_options
def update_command(filename: str, multi: bool, config_path: str | None) -> None:
    """Format each file named by FILENAME and write the result back."""
    console = get_console()
    diagnostics = DiagnosticLog()

    for path in expand_filename_pattern(filename, multi=multi):
        with translate_errors(path):
            result = update_file(path, to_config_path(config_path), diagnostics)
        if result.excluded:
            logger.info("Skipped excluded file %s", path)

    report_diagnostics(console, diagnostics)
