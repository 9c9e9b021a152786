"""Shared pytest fixtures and configuration for the rmutil test suite.

Guidelines
----------
* Real files only ever live under ``tmp_path``.
* Core tests use an in-memory filesystem fake, never the disk.
* ``PWD`` is always passed explicitly through ``environ``.
"""

from __future__ import annotations

import io
import sys
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def environ(tmp_path: Path) -> dict[str, str]:
    """Environment whose ``PWD`` points at the test's temp directory."""
    return {"PWD": str(tmp_path)}


@pytest.fixture
def feed_stdin(monkeypatch: pytest.MonkeyPatch) -> Callable[[str], None]:
    """Replace stdin with the given text for confirmation prompts."""

    def _feed(text: str) -> None:
        monkeypatch.setattr(sys, "stdin", io.StringIO(text))

    return _feed
