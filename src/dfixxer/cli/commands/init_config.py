# topmark:header:start
#
#   project      : dfixxer
#   file         : init_config.py
#   file_relpath : src/dfixxer/cli/commands/init_config.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""dfixxer CLI: `init-config` command.

Writes a configuration file holding every default option, so it can be
edited instead of written from scratch. An existing file is never
overwritten.
"""

from __future__ import annotations

from pathlib import Path

import click

from dfixxer.cli.cmd_common import get_console
from dfixxer.cli.errors import translate_errors
from dfixxer.config.io import create_default_config


@click.command(
    name="init-config",
    help="Write a dfixxer.toml with the default options to FILENAME.",
)
@click.argument("filename", type=click.Path(dir_okay=False))
def init_config_command(filename: str) -> None:
    """Create a default configuration file at FILENAME."""
    console = get_console()
    path = Path(filename)
    with translate_errors(path):
        create_default_config(path)
    console.print(f"Created default configuration file: {path}")
