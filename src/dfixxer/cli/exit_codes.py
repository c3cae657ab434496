# topmark:header:start
#
#   project      : dfixxer
#   file         : exit_codes.py
#   file_relpath : src/dfixxer/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Exit codes for the dfixxer CLI.

dfixxer aligns with the BSD ``sysexits`` convention where practical. The one
deliberate divergence is ``WOULD_CHANGE = 2``, returned by ``check`` when a
file is not formatted; tests must assert ``result.exception is None`` to tell
it apart from Click's own usage errors (which also exit with 2).
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the dfixxer CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure.
        WOULD_CHANGE: ``check`` found files that would be reformatted.
        USAGE_ERROR: Invalid invocation. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Input is not valid UTF-8. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        PIPELINE_ERROR: The source could not be parsed. Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Missing/invalid/malformed configuration. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: An unhandled library error occurred.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see module docstring

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    PIPELINE_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
