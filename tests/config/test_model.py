# topmark:header:start
#
#   project      : dfixxer
#   file         : test_model.py
#   file_relpath : tests/config/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Option model defaults and invariants."""

from __future__ import annotations

import pytest

from dfixxer.config.defaults import DEFAULT_MODULE_NAMES_TO_UPDATE
from dfixxer.config.model import (
    LineEnding,
    OperatorClass,
    Options,
    SpaceOperation,
    TextChangeOptions,
    UsesSectionStyle,
)


def test_defaults() -> None:
    """Defaults match the documented configuration."""
    options = Options()
    assert options.indentation == "  "
    assert options.line_ending is LineEnding.AUTO
    assert options.uses_section.uses_section_style is UsesSectionStyle.COMMA_AT_THE_END
    assert options.uses_section.module_names_to_update == DEFAULT_MODULE_NAMES_TO_UPDATE
    assert options.exclude_files == ()
    assert options.transformations.enable_inherited_call_expansion


def test_default_spacing_table() -> None:
    """Separators get a space after; every other operator is surrounded."""
    text_changes = TextChangeOptions()
    assert text_changes.policy(OperatorClass.COMMA) is SpaceOperation.AFTER
    assert text_changes.policy(OperatorClass.SEMI_COLON) is SpaceOperation.AFTER
    assert text_changes.policy(OperatorClass.COLON) is SpaceOperation.AFTER
    assert text_changes.policy(OperatorClass.ASSIGN) is SpaceOperation.BEFORE_AND_AFTER
    assert len(text_changes.spacing) == len(OperatorClass)


def test_spacing_must_cover_every_operator() -> None:
    """A partial table is rejected."""
    with pytest.raises(ValueError, match="Spacing policy missing"):
        TextChangeOptions(spacing={OperatorClass.COMMA: SpaceOperation.AFTER})


def test_spacing_is_read_only() -> None:
    """The policy table cannot be mutated after construction."""
    text_changes = TextChangeOptions()
    with pytest.raises(TypeError):
        text_changes.spacing[OperatorClass.COMMA] = SpaceOperation.NO_CHANGE  # type: ignore[index]


def test_with_policies_returns_copy() -> None:
    """Overrides produce a new value and leave the original untouched."""
    base = TextChangeOptions()
    changed = base.with_policies({OperatorClass.ADD: SpaceOperation.NO_CHANGE})
    assert changed.policy(OperatorClass.ADD) is SpaceOperation.NO_CHANGE
    assert base.policy(OperatorClass.ADD) is SpaceOperation.BEFORE_AND_AFTER


@pytest.mark.parametrize(
    ("token", "expected"),
    [(":=", OperatorClass.ASSIGN), ("<>", OperatorClass.NEQ), ("/", OperatorClass.FDIV), ("@", None)],
)
def test_operator_from_token(token: str, expected: OperatorClass | None) -> None:
    """Tokens map back to their operator class."""
    assert OperatorClass.from_token(token) is expected
    if expected is not None:
        assert expected.token == token


def test_space_operation_sides() -> None:
    """Each policy reports which sides it normalizes."""
    assert SpaceOperation.BEFORE.spaces_before and not SpaceOperation.BEFORE.spaces_after
    assert SpaceOperation.AFTER.spaces_after and not SpaceOperation.AFTER.spaces_before
    assert not SpaceOperation.NO_CHANGE.spaces_before


def test_line_endings() -> None:
    """Explicit line endings map to their strings."""
    assert LineEnding.CRLF.as_str() == "\r\n"
    assert LineEnding.LF.as_str() == "\n"
    assert LineEnding.AUTO.as_str() in ("\r\n", "\n")
