# topmark:header:start
#
#   project      : dfixxer
#   file         : main.py
#   file_relpath : src/dfixxer/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Main CLI entry point for dfixxer.

Defines the root Click group, configures logging and the output console,
and registers the subcommands:

* ``update``      – format files in place
* ``check``       – report the edits ``update`` would make
* ``init-config`` – write a default ``dfixxer.toml``
* ``parse``       – dump the syntax tree
* ``parse-debug`` – dump the code sections and formatting contexts
* ``version``     – print the version

Examples:
    ```bash
    dfixxer update src/Unit1.pas
    dfixxer check --multi --diff "src/**/*.pas"
    dfixxer --log-level DEBUG parse-debug src/Unit1.pas
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dfixxer.cli.commands.check import check_command
from dfixxer.cli.commands.init_config import init_config_command
from dfixxer.cli.commands.parse import parse_command, parse_debug_command
from dfixxer.cli.commands.update import update_command
from dfixxer.cli.commands.version import version_command
from dfixxer.cli.console import ClickConsole
from dfixxer.cli.options import (
    ColorMode,
    common_color_options,
    common_logging_options,
    resolve_color_mode,
)
from dfixxer.config.logging import get_logger, resolve_log_level_name, setup_logging

if TYPE_CHECKING:
    from dfixxer.config.logging import DfixxerLogger

logger: DfixxerLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    log_level: str | None,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize logging and the console on ``ctx.obj``.

    Color defaults to ``auto``: enabled only when stdout is a terminal.
    ``--no-color`` wins over ``--color``.
    """
    ctx.ensure_object(dict)
    level: int | None = resolve_log_level_name(log_level) if log_level else None
    setup_logging(level=level)
    ctx.obj["log_level"] = level
    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug("CLI initialized (log level: %s, color: %s)", log_level, enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="dfixxer: formatter for Delphi/Pascal uses clauses, section headers and spacing.",
)
@common_logging_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    log_level: str | None,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Root command group for dfixxer."""
    init_common_state(
        ctx,
        log_level=log_level,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(update_command)
cli.add_command(check_command)
cli.add_command(init_config_command)
cli.add_command(parse_command)
cli.add_command(parse_debug_command)
cli.add_command(version_command)
