# topmark:header:start
#
#   project      : dfixxer
#   file         : __init__.py
#   file_relpath : src/dfixxer/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Formatting pipeline.

- [`engine`][dfixxer.pipeline.engine]: text in, replacements out.
- [`files`][dfixxer.pipeline.files]: option resolution and file I/O around the engine.
- [`timing`][dfixxer.pipeline.timing]: per-phase durations.
"""

from __future__ import annotations

from dfixxer.pipeline.engine import format_source, produce_replacements
from dfixxer.pipeline.files import FileResult, process_file, read_source, update_file
from dfixxer.pipeline.timing import TimingCollector

__all__ = [
    "FileResult",
    "TimingCollector",
    "format_source",
    "process_file",
    "produce_replacements",
    "read_source",
    "update_file",
]
