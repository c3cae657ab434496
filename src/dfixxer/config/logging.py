# topmark:header:start
#
#   project      : dfixxer
#   file         : logging.py
#   file_relpath : src/dfixxer/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Logging setup for dfixxer.

Adds a TRACE level below DEBUG, an ``OFF`` pseudo-level for the CLI, a typed
logger class and a formatter that colors records with ``yachalk``. Modules
obtain their logger with ``logger: DfixxerLogger = get_logger(__name__)``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from dfixxer.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

# Above CRITICAL: nothing is emitted.
OFF_LEVEL: Final[int] = logging.CRITICAL + 10

DEFAULT_LOG_LEVEL: Final[int] = logging.WARNING

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

LOG_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "OFF": OFF_LEVEL,
}


class DfixxerLogger(logging.Logger):
    """Logger with a ``trace()`` method for the TRACE level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level.

        Args:
            msg (object): The message (format string).
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra attributes for the record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg=msg, args=args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(DfixxerLogger)


# Highest threshold first; the first one a record reaches picks its color.
LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record according to its level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color it with the style of its level."""
        message: str = super().format(record)
        for threshold, style in LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


def resolve_log_level_name(value: str) -> int | None:
    """Map a level name (or a numeric string) to a logging level.

    Args:
        value (str): Level name such as ``"debug"``, ``"TRACE"``, ``"off"`` or ``"10"``.

    Returns:
        int | None: The logging level, or ``None`` when ``value`` is not recognized.
    """
    v = value.strip().upper()
    if not v:
        return None
    if v.isdigit():
        return int(v)
    return LOG_LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``DFIXXER_LOG_LEVEL``, or None if unset or unknown."""
    val = os.environ.get(LOG_LEVEL_ENV_VAR)
    return resolve_log_level_name(val) if val else None


def setup_logging(level: int | None = None) -> None:
    """Install the dfixxer stdout handler on the root logger.

    Args:
        level (int | None): Level to use; when None, ``DFIXXER_LOG_LEVEL`` is
            consulted and WARNING is the fallback. Levels below INFO switch to a
            format that includes the source location of each record.
    """
    if level is None:
        level = resolve_env_log_level() or DEFAULT_LOG_LEVEL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)
    root_logger.propagate = False


def get_logger(name: str) -> DfixxerLogger:
    """Return the [`DfixxerLogger`][dfixxer.config.logging.DfixxerLogger] called ``name``."""
    return cast("DfixxerLogger", logging.getLogger(name))
