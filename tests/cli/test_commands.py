# topmark:header:start
#
#   project      : dfixxer
#   file         : test_commands.py
#   file_relpath : tests/cli/test_commands.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""CLI tests: every subcommand, exit codes and multi-file mode.

The grammar is replaced by the hand-written tree builder (``fake_parser``)
and each test runs in its own project directory holding a ``dfixxer.toml``
that pins LF line endings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from dfixxer.cli.exit_codes import ExitCode
from dfixxer.cli.main import cli
from dfixxer.constants import DFIXXER_VERSION

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

pytestmark = [pytest.mark.cli, pytest.mark.usefixtures("fake_parser")]


def run_cli(args: Sequence[str]) -> Result:
    """Invoke the CLI without colors and with logging off."""
    return CliRunner().invoke(cli, ["--no-color", "--log-level", "OFF", *args])


@pytest.fixture
def project(isolation: Path) -> Path:
    """A project directory with an LF configuration and one unformatted unit."""
    (isolation / "dfixxer.toml").write_text('line_ending = "Lf"\n', encoding="utf-8")
    (isolation / "a.pas").write_text("uses B, A;\n", encoding="utf-8")
    return isolation


def test_version() -> None:
    """``version`` prints the program name and version."""
    result = run_cli(["version"])
    assert result.exit_code == ExitCode.SUCCESS
    assert result.output.strip() == f"dfixxer {DFIXXER_VERSION}"


def test_no_subcommand_shows_help() -> None:
    """Running the group alone prints the command list."""
    result = run_cli([])
    assert result.exit_code == ExitCode.SUCCESS
    for name in ("update", "check", "init-config", "parse", "parse-debug", "version"):
        assert name in result.output


def test_check_reports_replacements(project: Path) -> None:
    """``check`` lists the edits and exits with WOULD_CHANGE."""
    result = run_cli(["check", "a.pas"])
    assert result.exit_code == ExitCode.WOULD_CHANGE
    assert "Replacement 1:" in result.output
    assert "  Location: 1:1-1:11" in result.output
    assert "    - uses B, A;" in result.output
    assert "    +   A," in result.output
    assert (project / "a.pas").read_text(encoding="utf-8") == "uses B, A;\n"


def test_check_diff(project: Path) -> None:
    """``check --diff`` prints a unified diff instead."""
    result = run_cli(["check", "--diff", "a.pas"])
    assert result.exit_code == ExitCode.WOULD_CHANGE
    assert "a.pas (original)" in result.output
    assert "-uses B, A;" in result.output
    assert "+  A," in result.output
    assert "Replacement 1:" not in result.output


def test_check_formatted_file_succeeds(project: Path) -> None:
    """Nothing to report means success and no output."""
    (project / "a.pas").write_text("uses\n  A,\n  B;\n", encoding="utf-8")
    result = run_cli(["check", "a.pas"])
    assert result.exit_code == ExitCode.SUCCESS
    assert result.output == ""


def test_update_rewrites_file(project: Path) -> None:
    """``update`` formats in place."""
    result = run_cli(["update", "a.pas"])
    assert result.exit_code == ExitCode.SUCCESS
    assert (project / "a.pas").read_text(encoding="utf-8") == "uses\n  A,\n  B;\n"


def test_update_multi(project: Path) -> None:
    """``--multi`` expands a recursive glob."""
    (project / "src" / "sub").mkdir(parents=True)
    (project / "src" / "b.pas").write_text("x:=1;\n", encoding="utf-8")
    (project / "src" / "sub" / "c.pas").write_text("y:=2;\n", encoding="utf-8")

    result = run_cli(["update", "--multi", "src/**/*.pas"])

    assert result.exit_code == ExitCode.SUCCESS
    assert (project / "src" / "b.pas").read_text(encoding="utf-8") == "x := 1;\n"
    assert (project / "src" / "sub" / "c.pas").read_text(encoding="utf-8") == "y := 2;\n"
    assert (project / "a.pas").read_text(encoding="utf-8") == "uses B, A;\n"


def test_check_multi_announces_each_file(project: Path) -> None:
    """Multi-file ``check`` prints a header per file."""
    (project / "b.pas").write_text("x := 1;\n", encoding="utf-8")
    result = run_cli(["check", "--multi", "*.pas"])
    assert result.exit_code == ExitCode.WOULD_CHANGE
    assert f"Processing file: {(project / 'a.pas').resolve()}" in result.output
    assert f"Processing file: {(project / 'b.pas').resolve()}" in result.output
    assert "1 file(s) would be reformatted." in result.output


@pytest.fixture
def plain_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove color overrides inherited from the environment."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.mark.usefixtures("plain_env")
def test_color_defaults_to_auto(project: Path) -> None:
    """Without a color flag, output to a non-terminal carries no ANSI codes."""
    result = CliRunner().invoke(cli, ["--log-level", "OFF", "check", "a.pas"])
    assert result.exit_code == ExitCode.WOULD_CHANGE
    assert "1 file(s) would be reformatted." in result.output
    assert "\x1b[" not in result.output


@pytest.mark.usefixtures("plain_env")
def test_color_always_and_no_color(project: Path) -> None:
    """``--color always`` forces ANSI codes and ``--no-color`` overrides it."""
    forced = CliRunner().invoke(cli, ["--log-level", "OFF", "--color", "always", "check", "a.pas"])
    assert forced.exit_code == ExitCode.WOULD_CHANGE
    assert "\x1b[" in forced.output

    both = CliRunner().invoke(
        cli, ["--log-level", "OFF", "--color", "always", "--no-color", "check", "a.pas"]
    )
    assert both.exit_code == ExitCode.WOULD_CHANGE
    assert "\x1b[" not in both.output


def test_multi_without_matches(project: Path) -> None:
    """A pattern that matches nothing is an input error."""
    result = run_cli(["check", "--multi", "nothing/*.pas"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND
    assert "No files match pattern" in result.output


def test_empty_filename_is_usage_error(project: Path) -> None:
    """An empty FILENAME is rejected before any file is touched."""
    result = run_cli(["check", ""])
    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "FILENAME must not be empty" in result.output


def test_missing_file(project: Path) -> None:
    """A missing single file is an input error."""
    result = run_cli(["update", "missing.pas"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND
    assert "File not found" in result.output


def test_invalid_utf8(project: Path) -> None:
    """Undecodable input maps to the data-error exit code."""
    (project / "bad.pas").write_bytes(b"x := '\xe9';\n")
    result = run_cli(["check", "bad.pas"])
    assert result.exit_code == ExitCode.ENCODING_ERROR


def test_excluded_file_is_skipped(project: Path) -> None:
    """Files matching ``exclude_files`` are neither checked nor updated."""
    (project / "dfixxer.toml").write_text(
        'line_ending = "Lf"\nexclude_files = ["a.pas"]\n', encoding="utf-8"
    )
    assert run_cli(["check", "a.pas"]).exit_code == ExitCode.SUCCESS
    assert run_cli(["update", "a.pas"]).exit_code == ExitCode.SUCCESS
    assert (project / "a.pas").read_text(encoding="utf-8") == "uses B, A;\n"


def test_explicit_config(project: Path) -> None:
    """``--config`` replaces the discovered configuration."""
    (project / "custom.toml").write_text(
        'line_ending = "Lf"\nindentation = "    "\n', encoding="utf-8"
    )
    result = run_cli(["update", "--config", "custom.toml", "a.pas"])
    assert result.exit_code == ExitCode.SUCCESS
    assert (project / "a.pas").read_text(encoding="utf-8") == "uses\n    A,\n    B;\n"


def test_broken_explicit_config(project: Path) -> None:
    """An explicit configuration that cannot be parsed is a configuration error."""
    (project / "broken.toml").write_text("[[[", encoding="utf-8")
    result = run_cli(["check", "--config", "broken.toml", "a.pas"])
    assert result.exit_code == ExitCode.CONFIG_ERROR


def test_non_utf8_configuration(project: Path) -> None:
    """A discovered config that is not UTF-8 is reported and defaults apply."""
    (project / "dfixxer.toml").write_bytes(b'indentation = "\xff"\n')
    result = run_cli(["check", "a.pas"])
    assert result.exception is None
    assert result.exit_code == ExitCode.WOULD_CHANGE
    assert "not valid UTF-8" in result.output

    explicit = run_cli(["check", "--config", "dfixxer.toml", "a.pas"])
    assert explicit.exit_code == ExitCode.CONFIG_ERROR
    assert "not valid UTF-8" in explicit.output


def test_init_config(isolation: Path) -> None:
    """``init-config`` writes defaults once and refuses to overwrite."""
    result = run_cli(["init-config", "dfixxer.toml"])
    assert result.exit_code == ExitCode.SUCCESS
    assert "Created default configuration file" in result.output
    assert "[uses_section]" in (isolation / "dfixxer.toml").read_text(encoding="utf-8")

    again = run_cli(["init-config", "dfixxer.toml"])
    assert again.exit_code == ExitCode.CONFIG_ERROR
    assert "already exists" in again.output


def test_parse_prints_tree(project: Path) -> None:
    """``parse`` prints one node per line."""
    result = run_cli(["parse", "a.pas"])
    assert result.exit_code == ExitCode.SUCCESS
    assert "Node kind: declUses | Text: uses B, A;" in result.output
    assert "  Node kind: kUses | Text: uses" in result.output


def test_parse_debug_prints_sections(project: Path) -> None:
    """``parse-debug`` prints the sections found."""
    result = run_cli(["parse-debug", "a.pas"])
    assert result.exit_code == ExitCode.SUCCESS
    assert "Code sections: 1" in result.output
    assert "Section 1: Uses [1:1-1:5] 'uses'" in result.output


def test_invalid_log_level_is_a_usage_error() -> None:
    """Click rejects unknown log levels."""
    result = CliRunner().invoke(cli, ["--log-level", "LOUD", "version"])
    assert result.exit_code == 2
    assert "LOUD" in result.output
