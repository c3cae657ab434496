# topmark:header:start
#
#   project      : dfixxer
#   file         : __main__.py
#   file_relpath : src/dfixxer/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Module entry point for running dfixxer via ``python -m dfixxer``.

It delegates directly to :func:`dfixxer.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how dfixxer is launched.

Examples:
    Check a file using the module interface::

        python -m dfixxer check src/Unit1.pas
"""

from __future__ import annotations

from dfixxer.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
