# topmark:header:start
#
#   project      : dfixxer
#   file         : __init__.py
#   file_relpath : src/dfixxer/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""TOML persistence for dfixxer options.

Submodules:
    - ``loaders``: read ``dfixxer.toml`` into ``Options``.
    - ``render``: serialize ``Options`` back to TOML.
    - ``getters`` / ``guards``: checked access to parsed TOML values.
"""

from __future__ import annotations

from dfixxer.config.io.loaders import (
    load_options,
    load_or_default,
    load_toml_dict,
    options_from_toml_dict,
    parse_toml_text,
)
from dfixxer.config.io.render import (
    create_default_config,
    options_to_toml_dict,
    render_options_toml,
    save_options,
)

__all__ = [
    "create_default_config",
    "load_options",
    "load_or_default",
    "load_toml_dict",
    "options_from_toml_dict",
    "options_to_toml_dict",
    "parse_toml_text",
    "render_options_toml",
    "save_options",
]
