"""Process exit statuses returned by :func:`rmutil.cli.app.main`.

``rm`` only distinguishes "everything went fine" from "something could
not be removed or the command line was wrong"; the remaining values
belong to the error boundary in :func:`rmutil.cli.app.cli`.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Every operand was removed, declined, or force-suppressed."""

GENERAL_ERROR: int = 1
"""At least one operand failed, or the command line was unusable."""

UNEXPECTED_ERROR: int = 2
"""A bug: an exception that is not an ``RmError`` reached the boundary."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C, typically while a ``-i`` prompt is waiting (128 + SIGINT)."""
