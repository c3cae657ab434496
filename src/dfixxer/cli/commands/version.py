# topmark:header:start
#
#   project      : dfixxer
#   file         : version.py
#   file_relpath : src/dfixxer/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""dfixxer CLI: `version` command."""

from __future__ import annotations

import click

from dfixxer.cli.cmd_common import get_console
from dfixxer.constants import DFIXXER_VERSION


@click.command(
    name="version",
    help="Show the current version of dfixxer.",
)
def version_command() -> None:
    """Print ``dfixxer <version>``."""
    console = get_console()
    console.print(f"dfixxer {DFIXXER_VERSION}")
