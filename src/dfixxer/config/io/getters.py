# topmark:header:start
#
#   project      : dfixxer
#   file         : getters.py
#   file_relpath : src/dfixxer/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Checked value getters for TOML config tables.

Every getter validates the expected shape of one key. A missing key silently
yields the default; a key of the wrong shape logs a warning, records it in the
given [`DiagnosticLog`][dfixxer.core.diagnostics.DiagnosticLog] and also yields
the default. User mistakes are thus surfaced without aborting the run.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar

from dfixxer.config.logging import get_logger
from dfixxer.core.enum_mixins import enum_from_value

from .guards import is_str_list, is_str_pair_list, is_toml_table

if TYPE_CHECKING:
    from dfixxer.config.logging import DfixxerLogger
    from dfixxer.core.diagnostics import DiagnosticLog

    from .types import TomlTable

logger: DfixxerLogger = get_logger(__name__)

E = TypeVar("E", bound=Enum)


def _warn(diagnostics: DiagnosticLog, where: str, key: str, value: Any, expected: str) -> None:
    message: str = f"Invalid value for '{key}' in {where}: expected {expected}, got {value!r}"
    logger.warning(message)
    diagnostics.add_warning(message)


def get_table_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> TomlTable:
    """Return the sub-table ``key``, or an empty table when absent or malformed.

    Args:
        table (TomlTable): Table to query.
        key (str): Name of the sub-table.
        where (str): Human-readable location used in diagnostics.
        diagnostics (DiagnosticLog): Sink for warnings.

    Returns:
        TomlTable: The sub-table or ``{}``.
    """
    value: Any = table.get(key)
    if value is None:
        return {}
    if is_toml_table(value):
        return value
    _warn(diagnostics, where, key, value, "a table")
    return {}


def get_bool_checked(
    table: TomlTable,
    key: str,
    default: bool,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> bool:
    """Extract a boolean; integers are not accepted as booleans."""
    value: Any = table.get(key)
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    _warn(diagnostics, where, key, value, "a boolean")
    return default


def get_string_checked(
    table: TomlTable,
    key: str,
    default: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> str:
    """Extract a string value."""
    value: Any = table.get(key)
    if value is None:
        return default
    if isinstance(value, str):
        return value
    _warn(diagnostics, where, key, value, "a string")
    return default


def get_string_list_checked(
    table: TomlTable,
    key: str,
    default: tuple[str, ...],
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> tuple[str, ...]:
    """Extract a list of strings as a tuple."""
    value: Any = table.get(key)
    if value is None:
        return default
    if is_str_list(value):
        return tuple(value)
    _warn(diagnostics, where, key, value, "a list of strings")
    return default


def get_string_pairs_checked(
    table: TomlTable,
    key: str,
    default: tuple[tuple[str, str], ...],
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> tuple[tuple[str, str], ...]:
    """Extract a list of ``[str, str]`` pairs as a tuple of tuples."""
    value: Any = table.get(key)
    if value is None:
        return default
    if is_str_pair_list(value):
        return tuple((pair[0], pair[1]) for pair in value)
    _warn(diagnostics, where, key, value, "a list of [pattern, path] pairs")
    return default


def get_enum_checked(
    table: TomlTable,
    key: str,
    enum_cls: type[E],
    default: E,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> E:
    """Extract an enum member by its value (the name written in TOML).

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        enum_cls (type[E]): Target enum class.
        default (E): Member returned when the key is absent or invalid.
        where (str): Human-readable location used in diagnostics.
        diagnostics (DiagnosticLog): Sink for warnings.

    Returns:
        E: The matching member or ``default``.
    """
    value: Any = table.get(key)
    if value is None:
        return default
    member: E | None = enum_from_value(enum_cls, value) if isinstance(value, str) else None
    if member is not None:
        return member
    allowed: str = ", ".join(str(m.value) for m in enum_cls)
    _warn(diagnostics, where, key, value, f"one of {allowed}")
    return default
