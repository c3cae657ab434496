# topmark:header:start
#
#   project      : dfixxer
#   file         : errors.py
#   file_relpath : src/dfixxer/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Exceptions for the dfixxer CLI.

Each exception carries the exit code Click uses when it propagates out of a
command. Library errors are translated into these by
[`translate_errors`][dfixxer.cli.errors.translate_errors].
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import IO, TYPE_CHECKING, Any

import click

from dfixxer.cli.exit_codes import ExitCode
from dfixxer.core.errors import ConfigError, DfixxerError, ParseError, SourceReadError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


class DfixxerCliError(click.ClickException):
    """Base class for all dfixxer CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (coloring happens in `show()`)."""
        return str(self.message)

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class DfixxerUsageError(DfixxerCliError):
    """Error for command-line invocation errors."""

    exit_code = ExitCode.USAGE_ERROR


class DfixxerConfigError(DfixxerCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class DfixxerFileNotFoundError(DfixxerCliError):
    """Error when an input path does not exist or a pattern matches nothing."""

    exit_code = ExitCode.FILE_NOT_FOUND


class DfixxerPermissionDeniedError(DfixxerCliError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class DfixxerIOError(DfixxerCliError):
    """Error for other I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class DfixxerEncodingError(DfixxerCliError):
    """Error for input that is not valid UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR


class DfixxerPipelineError(DfixxerCliError):
    """Error for sources that cannot be parsed."""

    exit_code = ExitCode.PIPELINE_ERROR


class DfixxerUnexpectedError(DfixxerCliError):
    """Error for library failures without a dedicated exit code."""

    exit_code = ExitCode.UNEXPECTED_ERROR


@contextmanager
def translate_errors(path: Path | str) -> Iterator[None]:
    """Re-raise library and OS errors for ``path`` as CLI errors with exit codes."""
    try:
        yield
    except FileNotFoundError as e:
        raise DfixxerFileNotFoundError(f"File not found: {path}") from e
    except PermissionError as e:
        raise DfixxerPermissionDeniedError(f"Permission denied: {path}") from e
    except OSError as e:
        raise DfixxerIOError(f"I/O error on {path}: {e}") from e
    except SourceReadError as e:
        raise DfixxerEncodingError(str(e)) from e
    except ConfigError as e:
        raise DfixxerConfigError(str(e)) from e
    except ParseError as e:
        raise DfixxerPipelineError(f"{path}: {e}") from e
    except DfixxerError as e:
        raise DfixxerUnexpectedError(f"{path}: {e}") from e
