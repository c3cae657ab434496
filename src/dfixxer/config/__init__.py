# topmark:header:start
#
#   project      : dfixxer
#   file         : __init__.py
#   file_relpath : src/dfixxer/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Configuration handling for dfixxer.

Options are immutable dataclasses ([`dfixxer.config.model`][dfixxer.config.model])
loaded from ``dfixxer.toml`` by [`dfixxer.config.io`][dfixxer.config.io].
Discovery walks up from each source file ([`dfixxer.config.paths`][dfixxer.config.paths]);
per-file exclusion and overrides live in [`dfixxer.config.matching`][dfixxer.config.matching].
"""

from __future__ import annotations

from dfixxer.config.model import (
    LineEnding,
    OperatorClass,
    Options,
    SpaceOperation,
    TextChangeOptions,
    TransformationOptions,
    UsesSectionOptions,
    UsesSectionStyle,
)

__all__ = [
    "LineEnding",
    "OperatorClass",
    "Options",
    "SpaceOperation",
    "TextChangeOptions",
    "TransformationOptions",
    "UsesSectionOptions",
    "UsesSectionStyle",
]
