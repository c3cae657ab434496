# topmark:header:start
#
#   project      : dfixxer
#   file         : uses_section.py
#   file_relpath : src/dfixxer/transformers/uses_section.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Reformat ``uses`` clauses: one unit per line, renamed and sorted.

Example (``CommaAtTheEnd``, two-space indentation)::

    uses B, A;

becomes::

    uses
      A,
      B;
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dfixxer.config.logging import get_logger
from dfixxer.config.model import UsesSectionStyle
from dfixxer.parsing.nodes import SectionKind
from dfixxer.replacements import TextReplacement

from .utility import adjust_replacement_for_line_position

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dfixxer.config.logging import DfixxerLogger
    from dfixxer.config.model import Options, UsesSectionOptions
    from dfixxer.parsing.nodes import CodeSection, ParsedNode

logger: DfixxerLogger = get_logger(__name__)


def rename_modules(modules: Sequence[str], rules: Sequence[str]) -> list[str]:
    """Apply ``"Namespace:Unit"`` rules: a bare ``Unit`` becomes ``Namespace.Unit``.

    Rules without a ``:`` are ignored. Only exact matches are renamed.
    """
    renames: dict[str, str] = {}
    for rule in rules:
        prefix, sep, name = rule.partition(":")
        if sep and name not in renames:
            renames[name] = f"{prefix}.{name}"
    return [renames.get(module, module) for module in modules]


def sort_modules(modules: Sequence[str], uses_options: UsesSectionOptions) -> list[str]:
    """Rename and sort unit names.

    Without priority namespaces, units are sorted case-insensitively. Otherwise
    units inside one of the namespaces (``System`` covers ``System.SysUtils``)
    come first; each group is sorted case-insensitively.

    Args:
        modules (Sequence[str]): Unit names in source order.
        uses_options (UsesSectionOptions): Rename rules and priority namespaces.

    Returns:
        list[str]: Sorted unit names (duplicates kept).
    """
    renamed: list[str] = rename_modules(modules, uses_options.module_names_to_update)
    namespaces: list[str] = [f"{ns.lower()}." for ns in uses_options.override_sorting_order]
    if not namespaces:
        return sorted(renamed, key=str.lower)

    prioritized: list[str] = []
    rest: list[str] = []
    for module in renamed:
        lowered: str = module.lower()
        if any(lowered.startswith(ns) for ns in namespaces):
            prioritized.append(module)
        else:
            rest.append(module)
    return sorted(prioritized, key=str.lower) + sorted(rest, key=str.lower)


def format_uses_clause(modules: Sequence[str], options: Options) -> str:
    """Render a ``uses`` clause in the configured style."""
    le: str = options.line_ending_str
    indent: str = options.indentation
    match options.uses_section.uses_section_style:
        case UsesSectionStyle.COMMA_AT_THE_END:
            return f"uses{le}{indent}" + f",{le}{indent}".join(modules) + ";"
        case UsesSectionStyle.COMMA_AT_THE_BEGINNING:
            lines: list[str] = []
            if modules:
                lines.append(f"{indent}  {modules[0]}")
                lines.extend(f"{indent}, {module}" for module in modules[1:])
            lines.append(f"{indent};")
            return f"uses{le}" + le.join(lines)


def transform_uses_section(
    section: CodeSection, options: Options, source: str
) -> TextReplacement | None:
    """Return the replacement for one ``uses`` clause, or ``None``.

    Clauses holding comments or compiler directives are left untouched. A
    clause that is already formatted still gets its (no-op) final replacement,
    which keeps operator spacing from rewriting it.
    """
    if section.keyword.kind is not SectionKind.USES:
        return None
    for sibling in section.siblings:
        if sibling.kind in (SectionKind.COMMENT, SectionKind.PREPROCESSOR):
            logger.warning(
                "Skipping uses clause at %d:%d: it contains a %s",
                section.keyword.start_row + 1,
                section.keyword.start_column + 1,
                "comment" if sibling.kind is SectionKind.COMMENT else "compiler directive",
            )
            return None

    terminator: ParsedNode | None = section.terminator
    if terminator is None:
        return None
    modules: list[str] = [m.text(source) for m in section.siblings_of_kind(SectionKind.MODULE)]
    text: str = format_uses_clause(sort_modules(modules, options.uses_section), options)
    start, text = adjust_replacement_for_line_position(source, section.keyword.start, text, options)
    return TextReplacement.literal(start, terminator.end, text, final=True)
