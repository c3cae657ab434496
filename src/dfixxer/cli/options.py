# topmark:header:start
#
#   project      : dfixxer
#   file         : options.py
#   file_relpath : src/dfixxer/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Reusable Click option decorators for dfixxer commands."""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING, TypeVar

import click

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import ParamSpec

    P = ParamSpec("P")

R = TypeVar("R")

LOG_LEVEL_CHOICES: tuple[str, ...] = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL", "OFF")


def common_logging_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--log-level`` to a command group."""
    f = click.option(
        "--log-level",
        "log_level",
        type=click.Choice(LOG_LEVEL_CHOICES, case_sensitive=False),
        default=None,
        help="Log level (default: WARNING, or $DFIXXER_LOG_LEVEL when set).",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError, OSError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` (auto, always, never) and ``--no-color`` to a command group."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` (an explicit configuration file overriding discovery)."""
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        default=None,
        help="Configuration file to use instead of searching for dfixxer.toml.",
    )(f)
    return f


def common_file_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the FILENAME argument and ``--multi`` (treat FILENAME as a glob pattern)."""
    f = click.argument("filename", type=str)(f)
    f = click.option(
        "--multi",
        "multi",
        is_flag=True,
        help="Treat FILENAME as a glob pattern (supports '**') and process every match.",
    )(f)
    return f
