# topmark:header:start
#
#   project      : dfixxer
#   file         : loaders.py
#   file_relpath : src/dfixxer/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Load ``dfixxer.toml`` files into [`Options`][dfixxer.config.model.Options].

Parsing is done with ``tomlkit`` and the document is unwrapped into plain
``dict`` structures before the typed getters validate it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from dfixxer.config.keys import Toml
from dfixxer.config.logging import get_logger
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
from dfixxer.core.diagnostics import DiagnosticLog
from dfixxer.core.errors import ConfigError

from .getters import (
    get_bool_checked,
    get_enum_checked,
    get_string_checked,
    get_string_list_checked,
    get_string_pairs_checked,
    get_table_checked,
)

if TYPE_CHECKING:
    from pathlib import Path

    from dfixxer.config.logging import DfixxerLogger

    from .types import TomlTable

logger: DfixxerLogger = get_logger(__name__)


def parse_toml_text(text: str) -> TomlTable:
    """Parse TOML text into a plain dict.

    Raises:
        TomlkitParseError: If the text is not valid TOML.
    """
    doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        return parse_toml_text(path.read_text(encoding="utf-8"))
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except UnicodeDecodeError as e:
        logger.error("Error decoding %s as UTF-8: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def _transformations_from_table(table: TomlTable, diagnostics: DiagnosticLog) -> TransformationOptions:
    defaults = TransformationOptions()
    where: str = f"[{Toml.SECTION_TRANSFORMATIONS}]"

    def flag(key: str, default: bool) -> bool:
        return get_bool_checked(table, key, default, where=where, diagnostics=diagnostics)

    return TransformationOptions(
        enable_uses_section=flag(Toml.KEY_ENABLE_USES_SECTION, defaults.enable_uses_section),
        enable_unit_program_section=flag(
            Toml.KEY_ENABLE_UNIT_PROGRAM_SECTION, defaults.enable_unit_program_section
        ),
        enable_single_keyword_sections=flag(
            Toml.KEY_ENABLE_SINGLE_KEYWORD_SECTIONS, defaults.enable_single_keyword_sections
        ),
        enable_procedure_section=flag(
            Toml.KEY_ENABLE_PROCEDURE_SECTION, defaults.enable_procedure_section
        ),
        enable_text_transformations=flag(
            Toml.KEY_ENABLE_TEXT_TRANSFORMATIONS, defaults.enable_text_transformations
        ),
        enable_inherited_call_expansion=flag(
            Toml.KEY_ENABLE_INHERITED_CALL_EXPANSION, defaults.enable_inherited_call_expansion
        ),
    )


def _text_changes_from_table(table: TomlTable, diagnostics: DiagnosticLog) -> TextChangeOptions:
    defaults = TextChangeOptions()
    where: str = f"[{Toml.SECTION_TEXT_CHANGES}]"
    spacing: dict[OperatorClass, SpaceOperation] = {
        op: get_enum_checked(
            table,
            op.value,
            SpaceOperation,
            defaults.policy(op),
            where=where,
            diagnostics=diagnostics,
        )
        for op in OperatorClass
    }
    return TextChangeOptions(
        spacing=spacing,
        colon_numeric_exception=get_bool_checked(
            table,
            Toml.KEY_COLON_NUMERIC_EXCEPTION,
            defaults.colon_numeric_exception,
            where=where,
            diagnostics=diagnostics,
        ),
        trim_trailing_whitespace=get_bool_checked(
            table,
            Toml.KEY_TRIM_TRAILING_WHITESPACE,
            defaults.trim_trailing_whitespace,
            where=where,
            diagnostics=diagnostics,
        ),
    )


def _uses_section_from_table(table: TomlTable, diagnostics: DiagnosticLog) -> UsesSectionOptions:
    defaults = UsesSectionOptions()
    where: str = f"[{Toml.SECTION_USES_SECTION}]"
    return UsesSectionOptions(
        uses_section_style=get_enum_checked(
            table,
            Toml.KEY_USES_SECTION_STYLE,
            UsesSectionStyle,
            defaults.uses_section_style,
            where=where,
            diagnostics=diagnostics,
        ),
        override_sorting_order=get_string_list_checked(
            table,
            Toml.KEY_OVERRIDE_SORTING_ORDER,
            defaults.override_sorting_order,
            where=where,
            diagnostics=diagnostics,
        ),
        module_names_to_update=get_string_list_checked(
            table,
            Toml.KEY_MODULE_NAMES_TO_UPDATE,
            defaults.module_names_to_update,
            where=where,
            diagnostics=diagnostics,
        ),
    )


def options_from_toml_dict(data: TomlTable, diagnostics: DiagnosticLog | None = None) -> Options:
    """Build [`Options`][dfixxer.config.model.Options] from a parsed TOML table.

    Missing keys keep their defaults. Ill-typed keys and unknown enum names are
    reported as warnings and also keep their defaults.

    Args:
        data (TomlTable): Parsed ``dfixxer.toml`` content.
        diagnostics (DiagnosticLog | None): Sink for warnings; a throwaway log is used
            when omitted.

    Returns:
        Options: The resulting options.
    """
    diag: DiagnosticLog = diagnostics if diagnostics is not None else DiagnosticLog()
    defaults = Options()
    where: str = "root table"
    return Options(
        indentation=get_string_checked(
            data, Toml.KEY_INDENTATION, defaults.indentation, where=where, diagnostics=diag
        ),
        line_ending=get_enum_checked(
            data,
            Toml.KEY_LINE_ENDING,
            LineEnding,
            defaults.line_ending,
            where=where,
            diagnostics=diag,
        ),
        transformations=_transformations_from_table(
            get_table_checked(
                data, Toml.SECTION_TRANSFORMATIONS, where=where, diagnostics=diag
            ),
            diag,
        ),
        text_changes=_text_changes_from_table(
            get_table_checked(data, Toml.SECTION_TEXT_CHANGES, where=where, diagnostics=diag),
            diag,
        ),
        uses_section=_uses_section_from_table(
            get_table_checked(data, Toml.SECTION_USES_SECTION, where=where, diagnostics=diag),
            diag,
        ),
        exclude_files=get_string_list_checked(
            data, Toml.KEY_EXCLUDE_FILES, defaults.exclude_files, where=where, diagnostics=diag
        ),
        custom_config_patterns=get_string_pairs_checked(
            data,
            Toml.KEY_CUSTOM_CONFIG_PATTERNS,
            defaults.custom_config_patterns,
            where=where,
            diagnostics=diag,
        ),
    )


def load_options(path: Path, diagnostics: DiagnosticLog | None = None) -> Options:
    """Load options from ``path``.

    Args:
        path (Path): Path to a ``dfixxer.toml`` file.
        diagnostics (DiagnosticLog | None): Sink for validation warnings.

    Returns:
        Options: The loaded options.

    Raises:
        ConfigError: If the file cannot be read, is not UTF-8 or is not valid TOML.
    """
    logger.debug("Loading configuration from %s", path)
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read configuration file {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Configuration file {path} is not valid UTF-8: {e}") from e
    try:
        data: TomlTable = parse_toml_text(text)
    except TomlkitParseError as e:
        raise ConfigError(f"Invalid TOML in configuration file {path}: {e}") from e
    return options_from_toml_dict(data, diagnostics)


def load_or_default(path: Path | None, diagnostics: DiagnosticLog | None = None) -> Options:
    """Load options from ``path``, falling back to defaults.

    A missing path or file yields defaults silently; a malformed file is
    logged as an error and also yields defaults.
    """
    if path is None or not path.is_file():
        logger.debug("No configuration file at %s, using defaults", path)
        return Options()
    try:
        return load_options(path, diagnostics)
    except ConfigError as e:
        logger.error("%s; using default options", e)
        if diagnostics is not None:
            diagnostics.add_error(str(e))
        return Options()
