# topmark:header:start
#
#   project      : dfixxer
#   file         : test_treesitter.py
#   file_relpath : tests/parsing/test_treesitter.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Grammar loading failures surface as parse errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from dfixxer.core.errors import ParseError
from dfixxer.parsing import treesitter

if TYPE_CHECKING:
    from collections.abc import Iterator


class DownloadError(Exception):
    """Stands for a loader error type that is not a LookupError or ValueError."""


@pytest.fixture
def fresh_parser_cache() -> Iterator[None]:
    """Drop the cached grammar before and after the test."""
    treesitter._get_parser.cache_clear()
    yield
    treesitter._get_parser.cache_clear()


@pytest.mark.usefixtures("fresh_parser_cache")
def test_grammar_load_failure_is_a_parse_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Any error raised while loading the grammar becomes a ParseError."""

    def failing_get_parser(name: str) -> object:
        raise DownloadError(f"cannot download {name}")

    monkeypatch.setattr(treesitter, "get_parser", failing_get_parser)
    with pytest.raises(ParseError, match="Failed to load the pascal grammar: cannot download"):
        treesitter.parse_tree("unit U;")
