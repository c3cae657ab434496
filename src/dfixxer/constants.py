# topmark:header:start
#
#   project      : dfixxer
#   file         : constants.py
#   file_relpath : src/dfixxer/constants.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""dfixxer Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    DFIXXER_VERSION: str = get_version("dfixxer")
except PackageNotFoundError:
    DFIXXER_VERSION = "0.0.0"

CONFIG_FILE_NAME: str = "dfixxer.toml"

PASCAL_LANGUAGE_NAME: str = "pascal"

LOG_LEVEL_ENV_VAR: str = "DFIXXER_LOG_LEVEL"

UTF8_BOM: str = "\ufeff"
