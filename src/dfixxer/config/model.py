# topmark:header:start
#
#   project      : dfixxer
#   file         : model.py
#   file_relpath : src/dfixxer/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Immutable runtime options for dfixxer.

The option tree mirrors ``dfixxer.toml``:

- ``Options`` (root table): indentation, line ending, file selection.
- ``TransformationOptions`` (``[transformations]``): which passes run.
- ``TextChangeOptions`` (``[text_changes]``): the spacing policy per operator class.
- ``UsesSectionOptions`` (``[uses_section]``): uses-clause layout, sort priority, renames.

All classes are frozen; collections are tuples or read-only mappings so a
single ``Options`` value can be shared by every transformer of a run.
Loading and saving live in [`dfixxer.config.io`][dfixxer.config.io].
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Final

from dfixxer.config.defaults import DEFAULT_MODULE_NAMES_TO_UPDATE


class SpaceOperation(str, Enum):
    """Spacing policy applied around one operator class.

    Values are the names written to ``dfixxer.toml``.
    """

    NO_CHANGE = "NoChange"
    BEFORE = "Before"
    AFTER = "After"
    BEFORE_AND_AFTER = "BeforeAndAfter"

    @property
    def spaces_before(self) -> bool:
        """Whether the policy normalizes the whitespace in front of the operator."""
        return self in (SpaceOperation.BEFORE, SpaceOperation.BEFORE_AND_AFTER)

    @property
    def spaces_after(self) -> bool:
        """Whether the policy normalizes the whitespace following the operator."""
        return self in (SpaceOperation.AFTER, SpaceOperation.BEFORE_AND_AFTER)


class LineEnding(str, Enum):
    """Line-ending convention for generated text."""

    AUTO = "Auto"
    CRLF = "Crlf"
    LF = "Lf"

    def as_str(self) -> str:
        """Return the concrete line-ending string.

        ``AUTO`` follows the platform convention (``"\\r\\n"`` on Windows).
        """
        match self:
            case LineEnding.CRLF:
                return "\r\n"
            case LineEnding.LF:
                return "\n"
            case LineEnding.AUTO:
                return "\r\n" if os.name == "nt" else "\n"


class UsesSectionStyle(str, Enum):
    """Layout of a reformatted uses clause."""

    COMMA_AT_THE_BEGINNING = "CommaAtTheBeginning"
    COMMA_AT_THE_END = "CommaAtTheEnd"


class OperatorClass(str, Enum):
    """Closed set of punctuation/operator classes with a configurable spacing policy.

    The value is the key under ``[text_changes]``; ``token`` is the source text.
    """

    COMMA = "comma"
    SEMI_COLON = "semi_colon"
    LT = "lt"
    EQ = "eq"
    NEQ = "neq"
    GT = "gt"
    LTE = "lte"
    GTE = "gte"
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    FDIV = "fdiv"
    ASSIGN = "assign"
    ASSIGN_ADD = "assign_add"
    ASSIGN_SUB = "assign_sub"
    ASSIGN_MUL = "assign_mul"
    ASSIGN_DIV = "assign_div"
    COLON = "colon"

    @property
    def token(self) -> str:
        """Source text of the operator (e.g. ``":="`` for ``ASSIGN``)."""
        return OPERATOR_TOKENS[self]

    @classmethod
    def from_token(cls, token: str) -> OperatorClass | None:
        """Return the operator class for a source token, or ``None``."""
        return _TOKEN_TO_OPERATOR.get(token)


OPERATOR_TOKENS: Final[Mapping[OperatorClass, str]] = MappingProxyType(
    {
        OperatorClass.COMMA: ",",
        OperatorClass.SEMI_COLON: ";",
        OperatorClass.LT: "<",
        OperatorClass.EQ: "=",
        OperatorClass.NEQ: "<>",
        OperatorClass.GT: ">",
        OperatorClass.LTE: "<=",
        OperatorClass.GTE: ">=",
        OperatorClass.ADD: "+",
        OperatorClass.SUB: "-",
        OperatorClass.MUL: "*",
        OperatorClass.FDIV: "/",
        OperatorClass.ASSIGN: ":=",
        OperatorClass.ASSIGN_ADD: "+=",
        OperatorClass.ASSIGN_SUB: "-=",
        OperatorClass.ASSIGN_MUL: "*=",
        OperatorClass.ASSIGN_DIV: "/=",
        OperatorClass.COLON: ":",
    }
)

_TOKEN_TO_OPERATOR: Final[dict[str, OperatorClass]] = {
    token: op for op, token in OPERATOR_TOKENS.items()
}


def default_spacing() -> Mapping[OperatorClass, SpaceOperation]:
    """Return the default spacing policy table.

    Comma, semicolon and colon get a space after; every other operator is
    surrounded by single spaces.
    """
    table: dict[OperatorClass, SpaceOperation] = {
        op: SpaceOperation.BEFORE_AND_AFTER for op in OperatorClass
    }
    table[OperatorClass.COMMA] = SpaceOperation.AFTER
    table[OperatorClass.SEMI_COLON] = SpaceOperation.AFTER
    table[OperatorClass.COLON] = SpaceOperation.AFTER
    return MappingProxyType(table)


@dataclass(frozen=True, slots=True)
class TextChangeOptions:
    """Options of the text scanner (``[text_changes]``).

    Attributes:
        spacing (Mapping[OperatorClass, SpaceOperation]): Policy per operator class.
            Must cover every ``OperatorClass`` exactly once.
        colon_numeric_exception (bool): Leave ``:`` untouched between two digits
            (``12:34:56``).
        trim_trailing_whitespace (bool): Strip spaces/tabs at the end of every line.
    """

    spacing: Mapping[OperatorClass, SpaceOperation] = field(default_factory=default_spacing)
    colon_numeric_exception: bool = True
    trim_trailing_whitespace: bool = True

    def __post_init__(self) -> None:
        missing = [op.value for op in OperatorClass if op not in self.spacing]
        if missing:
            raise ValueError(f"Spacing policy missing for: {', '.join(missing)}")
        object.__setattr__(self, "spacing", MappingProxyType(dict(self.spacing)))

    def policy(self, op: OperatorClass) -> SpaceOperation:
        """Return the spacing policy configured for ``op``."""
        return self.spacing[op]

    def with_policies(self, overrides: Mapping[OperatorClass, SpaceOperation]) -> TextChangeOptions:
        """Return a copy with the given operator policies replaced."""
        table = dict(self.spacing)
        table.update(overrides)
        return replace(self, spacing=table)


@dataclass(frozen=True, slots=True)
class TransformationOptions:
    """Switches for the individual passes (``[transformations]``)."""

    enable_uses_section: bool = True
    enable_unit_program_section: bool = True
    enable_single_keyword_sections: bool = True
    enable_procedure_section: bool = True
    enable_text_transformations: bool = True
    enable_inherited_call_expansion: bool = True


@dataclass(frozen=True, slots=True)
class UsesSectionOptions:
    """Uses-clause layout options (``[uses_section]``).

    Attributes:
        uses_section_style (UsesSectionStyle): Where the separating commas go.
        override_sorting_order (tuple[str, ...]): Namespaces whose units are sorted first
            (a unit matches ``System`` when it starts with ``System.``).
        module_names_to_update (tuple[str, ...]): ``"Namespace:Unit"`` rename rules applied
            to bare unit names before sorting.
    """

    uses_section_style: UsesSectionStyle = UsesSectionStyle.COMMA_AT_THE_END
    override_sorting_order: tuple[str, ...] = ()
    module_names_to_update: tuple[str, ...] = DEFAULT_MODULE_NAMES_TO_UPDATE


@dataclass(frozen=True, slots=True)
class Options:
    """Immutable runtime options for one file.

    Attributes:
        indentation (str): Indentation unit used by generated text.
        line_ending (LineEnding): Line-ending convention used by generated text.
        transformations (TransformationOptions): Pass switches.
        text_changes (TextChangeOptions): Scanner options.
        uses_section (UsesSectionOptions): Uses-clause options.
        exclude_files (tuple[str, ...]): Glob patterns (relative to the config file)
            of files that are never processed.
        custom_config_patterns (tuple[tuple[str, str], ...]): ``(glob, config path)``
            pairs; a matching file is processed with the referenced config instead.
    """

    indentation: str = "  "
    line_ending: LineEnding = LineEnding.AUTO
    transformations: TransformationOptions = field(default_factory=TransformationOptions)
    text_changes: TextChangeOptions = field(default_factory=TextChangeOptions)
    uses_section: UsesSectionOptions = field(default_factory=UsesSectionOptions)
    exclude_files: tuple[str, ...] = ()
    custom_config_patterns: tuple[tuple[str, str], ...] = ()

    @property
    def line_ending_str(self) -> str:
        """Concrete line-ending string for generated text."""
        return self.line_ending.as_str()
