# topmark:header:start
#
#   project      : dfixxer
#   file         : errors.py
#   file_relpath : src/dfixxer/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Library-level exceptions for dfixxer.

These exceptions are raised by the configuration, parsing and pipeline layers
and carry no CLI concerns. The CLI translates them into
[`dfixxer.cli.errors`][dfixxer.cli.errors] exceptions with dedicated exit codes.

Local rejections (a section that cannot be safely rewritten) are *not*
exceptions; they are logged and skipped.
"""

from __future__ import annotations


class DfixxerError(Exception):
    """Base class for all dfixxer library errors."""


class ConfigError(DfixxerError):
    """A configuration file could not be read, parsed or written."""


class ParseError(DfixxerError):
    """The source could not be turned into a syntax tree."""


class SourceReadError(DfixxerError):
    """An input file could not be read or decoded."""
