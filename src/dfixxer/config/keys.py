# topmark:header:start
#
#   project      : dfixxer
#   file         : keys.py
#   file_relpath : src/dfixxer/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Canonical TOML section and key names for dfixxer configuration.

This module defines the authoritative string constants used when reading,
writing, and validating ``dfixxer.toml``.

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
    - Spacing-policy keys under ``[text_changes]`` are not listed here: they are
      owned by [`OperatorClass`][dfixxer.config.model.OperatorClass], whose
      values double as TOML keys.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by dfixxer configuration.

    The ordering of constants mirrors the rendered default configuration.
    """

    # Root table
    KEY_INDENTATION: Final[str] = "indentation"
    KEY_LINE_ENDING: Final[str] = "line_ending"
    KEY_EXCLUDE_FILES: Final[str] = "exclude_files"
    KEY_CUSTOM_CONFIG_PATTERNS: Final[str] = "custom_config_patterns"

    # [transformations]
    SECTION_TRANSFORMATIONS: Final[str] = "transformations"

    KEY_ENABLE_USES_SECTION: Final[str] = "enable_uses_section"
    KEY_ENABLE_UNIT_PROGRAM_SECTION: Final[str] = "enable_unit_program_section"
    KEY_ENABLE_SINGLE_KEYWORD_SECTIONS: Final[str] = "enable_single_keyword_sections"
    KEY_ENABLE_PROCEDURE_SECTION: Final[str] = "enable_procedure_section"
    KEY_ENABLE_TEXT_TRANSFORMATIONS: Final[str] = "enable_text_transformations"
    KEY_ENABLE_INHERITED_CALL_EXPANSION: Final[str] = "enable_inherited_call_expansion"

    # [text_changes]
    SECTION_TEXT_CHANGES: Final[str] = "text_changes"

    KEY_COLON_NUMERIC_EXCEPTION: Final[str] = "colon_numeric_exception"
    KEY_TRIM_TRAILING_WHITESPACE: Final[str] = "trim_trailing_whitespace"

    # [uses_section]
    SECTION_USES_SECTION: Final[str] = "uses_section"

    KEY_USES_SECTION_STYLE: Final[str] = "uses_section_style"
    KEY_OVERRIDE_SORTING_ORDER: Final[str] = "override_sorting_order"
    KEY_MODULE_NAMES_TO_UPDATE: Final[str] = "module_names_to_update"
