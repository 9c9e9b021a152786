"""Regression tests for the optional Rich dependency.

These tests verify that removal and bootstrap commands keep working,
with the same plain-text messages, when ``rich`` cannot be imported.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from rmutil.cli import exit_codes
from rmutil.cli.app import main
from rmutil.cli.console import get_rich_console
from rmutil.exceptions import RmError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)


def test_console_loader_raises_cleanly(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(RmError, match="rich is not installed"):
        get_rich_console()


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    assert main(["--help"], environ={}) == exit_codes.SUCCESS


def test_usage_falls_back_to_plain_stderr(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    code = main([], environ={})
    assert code == exit_codes.GENERAL_ERROR
    assert "Usage: rm [OPTION]... FILE..." in capsys.readouterr().err


def test_failure_message_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    code = main(["missing.txt"], environ={"PWD": str(tmp_path)})
    err = capsys.readouterr().err
    assert code == exit_codes.GENERAL_ERROR
    assert "rm: cannot remove 'missing.txt': No such file or directory\n" in err


def test_removal_works_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    _hide_rich(monkeypatch)
    target = tmp_path / "a.txt"
    target.write_text("x")

    assert main(["a.txt"], environ={"PWD": str(tmp_path)}) == exit_codes.SUCCESS
    assert not target.exists()
