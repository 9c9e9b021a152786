"""Tests for operand path resolution (core/paths.py)."""

from __future__ import annotations

import os

import pytest

from rmutil.core.paths import DEFAULT_BASE_DIR, base_directory, resolve_path


class TestResolvePath:
    @pytest.mark.parametrize("base", ["/home/user", ".", "relative/base", ""])
    def test_absolute_is_unchanged(self, base: str) -> None:
        absolute = os.path.abspath(os.path.join(os.sep, "tmp", "a.txt"))
        assert resolve_path(absolute, base) == absolute

    def test_relative_is_joined(self) -> None:
        assert resolve_path("a.txt", "/work") == os.path.join("/work", "a.txt")

    def test_no_normalisation(self) -> None:
        result = resolve_path("../x/./a.txt", "/work/sub")
        assert result == os.path.join("/work/sub", "../x/./a.txt")
        assert ".." in result

    def test_default_base(self) -> None:
        assert resolve_path("a.txt", DEFAULT_BASE_DIR) == os.path.join(".", "a.txt")


class TestBaseDirectory:
    def test_reads_pwd(self) -> None:
        assert base_directory({"PWD": "/srv/data"}) == "/srv/data"

    def test_defaults_to_dot(self) -> None:
        assert base_directory({}) == "."

    def test_ignores_other_variables(self) -> None:
        assert base_directory({"HOME": "/root"}) == "."
