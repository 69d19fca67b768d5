# topmark:header:start
#
#   project      : AdventRun
#   file         : test_argument_errors.py
#   file_relpath : tests/cli/test_argument_errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI: malformed, missing and out-of-range day/part arguments.

All of these are rejected by Click before the registry or the filesystem is
consulted, and exit with USAGE_ERROR (2).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import assert_USAGE_ERROR, run_cli, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path

pytestmark: pytest.MarkDecorator = pytest.mark.cli


@pytest.mark.parametrize(
    ("argv", "fragment"),
    [
        (["-p", "1"], "Missing option '-d' / '--day'"),
        (["-d", "1"], "Missing option '-p' / '--part'"),
        (["-d", "abc", "-p", "1"], "Day must be a whole number, got 'abc'"),
        (["-d", "0", "-p", "1"], "Day must be between 1 and 25, got 0"),
        (["-d", "26", "-p", "1"], "Day must be between 1 and 25, got 26"),
        (["-d", "1", "-p", "3"], "Part must be 1 or 2, got 3"),
        (["-d", "1", "-p", "two"], "Part must be a whole number, got 'two'"),
    ],
)
def test_invalid_arguments_exit_with_usage_error(
    tmp_path: Path, argv: list[str], fragment: str
) -> None:
    result = run_cli_in(tmp_path, argv)
    assert_USAGE_ERROR(result)
    assert fragment in result.stderr
    assert result.stdout == ""


def test_missing_day_and_part() -> None:
    assert_USAGE_ERROR(run_cli([]))


def test_unknown_option() -> None:
    result = run_cli(["-d", "1", "-p", "1", "--bogus"])
    assert_USAGE_ERROR(result)
    assert "No such option" in result.stderr


def test_there_is_no_quiet_flag() -> None:
    """The default output is already the bare answer."""
    result = run_cli(["-d", "1", "-p", "1", "-q"])
    assert_USAGE_ERROR(result)
    assert "No such option" in result.stderr


def test_help_lists_options() -> None:
    result = run_cli(["--help"])
    assert result.exit_code == 0
    for option in ("--day", "--part", "--list-days", "--inputs-dir", "INPUT_PATH"):
        assert option in result.stdout
