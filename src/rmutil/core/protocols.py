"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters and CLI
prompts must satisfy.  Core code depends ONLY on these protocols —
never on concrete implementations.
"""

from __future__ import annotations

from typing import Protocol


class FileSystemProvider(Protocol):
    """Contract for the filesystem backend used by the remover.

    Implementations must map every OS-level exception to
    :class:`~rmutil.exceptions.RmError` subclasses.
    """

    def stat(self, path: str) -> None:
        """Check that metadata for *path* can be read.

        Raises
        ------
        LookupFailureError
            When the lookup fails.  ``missing`` is set when the cause is
            that *path* does not exist.
        """
        ...  # pragma: no cover

    def unlink(self, path: str) -> None:
        """Delete the file at *path*.

        Raises
        ------
        DeleteFailureError
            When the file cannot be deleted for any reason.
        """
        ...  # pragma: no cover


class Confirmer(Protocol):
    """Contract for the interactive yes/no question asked per file."""

    def __call__(self, path: str) -> bool:
        """Return ``True`` when the user agreed to remove *path*."""
        ...  # pragma: no cover
