"""Operand path resolution against the caller's working directory."""

from __future__ import annotations

import os
from collections.abc import Mapping

BASE_DIR_ENV: str = "PWD"
DEFAULT_BASE_DIR: str = "."


def base_directory(environ: Mapping[str, str]) -> str:
    """Return the directory relative operands are joined onto."""
    return environ.get(BASE_DIR_ENV, DEFAULT_BASE_DIR)


def resolve_path(operand: str, base_dir: str) -> str:
    """Return *operand* unchanged when absolute, else joined onto *base_dir*.

    This is a textual join: ``.`` and ``..`` segments are kept and
    symlinks are not followed.
    """
    if os.path.isabs(operand):
        return operand
    return os.path.join(base_dir, operand)
