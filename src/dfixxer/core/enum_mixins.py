# topmark:header:start
#
#   project      : dfixxer
#   file         : enum_mixins.py
#   file_relpath : src/dfixxer/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Generic Enum lookup helpers (typing-friendly, UI-agnostic).

Provided:
    - ``enum_from_value(enum_cls, value, *, case_insensitive=False)``:
        Typed lookup of a ``str``-valued Enum member by its value. Returns ``None`` on miss.

Example:
    ```python
    from enum import Enum
    from dfixxer.core.enum_mixins import enum_from_value

    class Style(str, Enum):
        FIRST = "CommaAtTheBeginning"

    assert enum_from_value(Style, "commaatthebeginning", case_insensitive=True) is Style.FIRST
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

_E = TypeVar("_E", bound=Enum)


def enum_from_value(
    enum_cls: type[_E],
    value: str | None,
    *,
    case_insensitive: bool = False,
) -> _E | None:
    """Return the member of ``enum_cls`` whose ``.value`` equals ``value``.

    Args:
        enum_cls (type[_E]): The Enum class to search.
        value (str | None): The serialized value (e.g. ``"BeforeAndAfter"``).
            If ``None``, returns ``None``.
        case_insensitive (bool): If True, values are compared with ``str.casefold``.

    Returns:
        _E | None: The matching enum member, or ``None`` if not found.
    """
    if value is None:
        return None
    target: str = value.casefold() if case_insensitive else value
    for member in enum_cls:
        candidate = str(member.value)
        if (candidate.casefold() if case_insensitive else candidate) == target:
            return member
    return None
