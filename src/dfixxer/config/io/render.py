# topmark:header:start
#
#   project      : dfixxer
#   file         : render.py
#   file_relpath : src/dfixxer/config/io/render.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Serialize [`Options`][dfixxer.config.model.Options] to ``dfixxer.toml``.

Enum values are written by name (e.g. ``"BeforeAndAfter"``) and every field is
emitted, so a rendered file documents the complete effective configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit

from dfixxer.config.keys import Toml
from dfixxer.config.logging import get_logger
from dfixxer.config.model import OperatorClass, Options
from dfixxer.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from tomlkit.items import Array

    from dfixxer.config.logging import DfixxerLogger

    from .types import TomlTable

logger: DfixxerLogger = get_logger(__name__)


def options_to_toml_dict(options: Options) -> TomlTable:
    """Return ``options`` as a plain TOML-compatible dict.

    Root scalars come first, followed by the sub-tables.
    """
    transformations = options.transformations
    text_changes = options.text_changes
    uses = options.uses_section

    text_changes_table: TomlTable = {op.value: text_changes.policy(op).value for op in OperatorClass}
    text_changes_table[Toml.KEY_COLON_NUMERIC_EXCEPTION] = text_changes.colon_numeric_exception
    text_changes_table[Toml.KEY_TRIM_TRAILING_WHITESPACE] = text_changes.trim_trailing_whitespace

    return {
        Toml.KEY_INDENTATION: options.indentation,
        Toml.KEY_LINE_ENDING: options.line_ending.value,
        Toml.KEY_EXCLUDE_FILES: list(options.exclude_files),
        Toml.KEY_CUSTOM_CONFIG_PATTERNS: [list(pair) for pair in options.custom_config_patterns],
        Toml.SECTION_TRANSFORMATIONS: {
            Toml.KEY_ENABLE_USES_SECTION: transformations.enable_uses_section,
            Toml.KEY_ENABLE_UNIT_PROGRAM_SECTION: transformations.enable_unit_program_section,
            Toml.KEY_ENABLE_SINGLE_KEYWORD_SECTIONS: transformations.enable_single_keyword_sections,
            Toml.KEY_ENABLE_PROCEDURE_SECTION: transformations.enable_procedure_section,
            Toml.KEY_ENABLE_TEXT_TRANSFORMATIONS: transformations.enable_text_transformations,
            Toml.KEY_ENABLE_INHERITED_CALL_EXPANSION: (
                transformations.enable_inherited_call_expansion
            ),
        },
        Toml.SECTION_TEXT_CHANGES: text_changes_table,
        Toml.SECTION_USES_SECTION: {
            Toml.KEY_USES_SECTION_STYLE: uses.uses_section_style.value,
            Toml.KEY_OVERRIDE_SORTING_ORDER: list(uses.override_sorting_order),
            Toml.KEY_MODULE_NAMES_TO_UPDATE: list(uses.module_names_to_update),
        },
    }


def _multiline_array(values: list[Any]) -> Array:
    array: Array = tomlkit.array()
    array.extend(values)
    return array.multiline(len(values) > 1)


def render_options_toml(options: Options) -> str:
    """Render ``options`` as a TOML document.

    Lists with more than one entry are written one item per line.

    Args:
        options (Options): Options to render.

    Returns:
        str: The TOML document text.
    """
    doc: tomlkit.TOMLDocument = tomlkit.document()
    for key, value in options_to_toml_dict(options).items():
        if isinstance(value, dict):
            table = tomlkit.table()
            for sub_key, sub_value in cast("TomlTable", value).items():
                table.add(
                    sub_key,
                    _multiline_array(sub_value) if isinstance(sub_value, list) else sub_value,
                )
            doc.add(key, table)
        elif isinstance(value, list):
            doc.add(key, _multiline_array(cast("list[Any]", value)))
        else:
            doc.add(key, value)
    return tomlkit.dumps(doc)


def save_options(options: Options, path: Path) -> None:
    """Write ``options`` to ``path`` (UTF-8), overwriting any existing file.

    Raises:
        ConfigError: If the file cannot be written.
    """
    try:
        path.write_text(render_options_toml(options), encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot write configuration file {path}: {e}") from e
    logger.info("Configuration written to %s", path)


def create_default_config(path: Path) -> None:
    """Write a configuration file holding the default options.

    Args:
        path (Path): Destination file.

    Raises:
        ConfigError: If ``path`` already exists or cannot be written.
    """
    if path.exists():
        raise ConfigError(f"Configuration file already exists: {path}")
    save_options(Options(), path)
