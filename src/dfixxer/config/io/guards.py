# topmark:header:start
#
#   project      : dfixxer
#   file         : guards.py
#   file_relpath : src/dfixxer/config/io/guards.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Type guards for values coming out of a parsed ``dfixxer.toml``.

The predicates are ``TypeGuard``-based so Pyright can narrow the ``Any``
values produced by ``tomlkit`` once they have been checked.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard

if TYPE_CHECKING:
    from .types import TomlTable


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``obj`` is a ``dict``.
    """
    return isinstance(obj, dict)


def is_any_list(obj: object) -> TypeGuard[list[Any]]:
    """Type guard for a generic list value (item types are not checked)."""
    return isinstance(obj, list)


def is_str_list(obj: object) -> TypeGuard[list[str]]:
    """Type guard for a ``list[str]`` value."""
    return is_any_list(obj) and all(isinstance(x, str) for x in obj)


def is_str_pair_list(obj: object) -> TypeGuard[list[list[str]]]:
    """Type guard for a list of two-string lists (``[["glob", "path"], ...]``).

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[list[list[str]]]: ``True`` if every item is a list of exactly two strings.
    """
    return is_any_list(obj) and all(is_str_list(x) and len(x) == 2 for x in obj)
