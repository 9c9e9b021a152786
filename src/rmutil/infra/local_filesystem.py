"""Local-disk implementation of :class:`~rmutil.core.protocols.FileSystemProvider`.

This module is the **only** place in the codebase that calls into
:mod:`os` for metadata lookups and deletions.  Every ``OSError`` is
caught here and re-raised as a typed
:class:`~rmutil.exceptions.RmError` subclass — nothing raw escapes the
infrastructure boundary.
"""

from __future__ import annotations

import os

from rmutil.exceptions import DeleteFailureError, LookupFailureError


def describe_os_error(exc: OSError) -> str:
    """Return the human-readable part of *exc* (``strerror`` when set)."""
    return exc.strerror or str(exc)


class LocalFileSystem:
    """Concrete :class:`FileSystemProvider` backed by :mod:`os`.

    Usage::

        fs = LocalFileSystem()
        fs.stat("/tmp/report.txt")
        fs.unlink("/tmp/report.txt")
    """

    def stat(self, path: str) -> None:
        """Read the metadata of *path*, following symlinks.

        Raises
        ------
        LookupFailureError
            With ``missing=True`` for ``FileNotFoundError``; for any
            other ``OSError`` with ``missing=False``.
        """
        try:
            os.stat(path)
        except FileNotFoundError as exc:
            raise LookupFailureError(
                path, describe_os_error(exc), missing=True,
            ) from exc
        except OSError as exc:
            raise LookupFailureError(path, describe_os_error(exc)) from exc

    def unlink(self, path: str) -> None:
        """Delete the file at *path*.

        Directories are refused by the OS (``IsADirectoryError`` or
        ``PermissionError`` depending on platform).

        Raises
        ------
        DeleteFailureError
            For any ``OSError`` raised by :func:`os.unlink`.
        """
        try:
            os.unlink(path)
        except OSError as exc:
            raise DeleteFailureError(path, describe_os_error(exc)) from exc
