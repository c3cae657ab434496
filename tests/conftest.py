# topmark:header:start
#
#   project      : dfixxer
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Pytest configuration for the dfixxer test suite.

Sets up logging for test runs and provides fixtures shared across the suite:
an isolated working directory and a grammar-free parser substitute.

Notes:
    Most tests never load the Pascal grammar. They build syntax trees by hand
    with [`tests.helpers`][tests.helpers] and inject them either through the
    ``parse=`` argument of the engine or with the ``fake_parser`` fixture.
    Tests marked ``integration`` use the real grammar and are skipped when
    ``tree-sitter-language-pack`` is not installed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from dfixxer.config import logging

from tests.helpers import build_tree

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def silence_dfixxer_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture used to manipulate environment variables.
    """
    monkeypatch.delenv("DFIXXER_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Reinstall the test logging setup after CLI runs replaced the root handler."""
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level for all tests so failures come with full context.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an isolated project directory.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The project root, also the current working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


@pytest.fixture
def fake_parser(monkeypatch: pytest.MonkeyPatch) -> None:
    """Replace the grammar with the hand-written tree builder.

    [`parse_source`][dfixxer.parsing.parse_source] and the ``parse`` command
    look ``parse_tree`` up at call time, so patching the module attribute is
    enough to keep the grammar out of the run.
    """
    monkeypatch.setattr("dfixxer.parsing.treesitter.parse_tree", build_tree)
