# topmark:header:start
#
#   project      : dfixxer
#   file         : parse.py
#   file_relpath : src/dfixxer/cli/commands/parse.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""dfixxer CLI: `parse` and `parse-debug` commands.

Diagnostic views of how a source file is understood: `parse` dumps the raw
syntax tree, `parse-debug` the code sections and contexts the formatter
works from.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dfixxer.cli.cmd_common import announce_file, get_console
from dfixxer.cli.errors import translate_errors
from dfixxer.cli.files import expand_filename_pattern
from dfixxer.cli.options import common_file_options
from dfixxer.parsing import format_parse_result, parse_source
from dfixxer.pipeline import read_source

if TYPE_CHECKING:
    from collections.abc import Callable


def _run(filename: str, multi: bool, render: Callable[[str], str]) -> None:
    console = get_console()
    for path in expand_filename_pattern(filename, multi=multi):
        if multi:
            announce_file(console, path)
        with translate_errors(path):
            source = read_source(path)
            text = render(source)
        console.print(text)


def _render_tree(source: str) -> str:
    # Deferred: the grammar is only loaded when a tree is actually needed.
    from dfixxer.parsing.treesitter import parse_tree, render_tree

    return render_tree(parse_tree(source), source)


@click.command(
    name="parse",
    help="Print the syntax tree of FILENAME, one node per line.",
)
@common_file_options
def parse_command(filename: str, multi: bool) -> None:
    """Dump the syntax tree of each file named by FILENAME."""
    _run(filename, multi, _render_tree)


@click.command(
    name="parse-debug",
    help="Print the code sections and formatting contexts found in FILENAME.",
)
@common_file_options
def parse_debug_command(filename: str, multi: bool) -> None:
    """Dump the code sections of each file named by FILENAME."""
    _run(filename, multi, lambda source: format_parse_result(parse_source(source), source))
