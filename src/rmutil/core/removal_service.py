"""Core removal service — the per-operand check/confirm/delete pipeline.

The filesystem and the confirmation prompt are injected at construction
time.  The service is responsible for:

* Applying force semantics to a failed existence check.
* Asking for confirmation in interactive mode.
* Delegating the deletion to the provider.
* Ensuring only :class:`~rmutil.exceptions.RmError` subclasses escape.

Guarantees
----------
* Pure orchestration — no ``print()``, no direct OS calls.
* At most one deletion and one confirmation per call.
"""

from __future__ import annotations

from rmutil.core.models import RemovalOutcome, RemoveOptions
from rmutil.core.protocols import Confirmer, FileSystemProvider
from rmutil.exceptions import (
    ConfirmationError,
    DeleteFailureError,
    LookupFailureError,
    RmError,
)


class RemovalService:
    """Stateless service that removes one resolved path at a time.

    Parameters
    ----------
    filesystem:
        Any object satisfying the :class:`FileSystemProvider` protocol.
    confirm:
        Callable asked before each removal in interactive mode.
    """

    def __init__(self, filesystem: FileSystemProvider, confirm: Confirmer) -> None:
        self._filesystem: FileSystemProvider = filesystem
        self._confirm: Confirmer = confirm

    def remove(self, path: str, options: RemoveOptions) -> RemovalOutcome:
        """Remove the file at *path*.

        Returns
        -------
        RemovalOutcome
            ``REMOVED`` after a deletion, ``DECLINED`` when the user
            did not confirm, ``ABSENT`` when force mode found nothing
            to remove.

        Raises
        ------
        LookupFailureError
            When the existence check fails and is not suppressed by
            force mode.
        ConfirmationError
            When the interactive answer cannot be read (undecodable
            input, I/O error on the terminal).
        DeleteFailureError
            When the deletion itself fails.
        """
        try:
            self._filesystem.stat(path)
        except LookupFailureError as exc:
            if options.force and exc.missing:
                return RemovalOutcome.ABSENT
            raise

        if options.interactive:
            try:
                agreed = self._confirm(path)
            except RmError:
                raise
            except Exception as exc:
                raise ConfirmationError(path, str(exc)) from exc
            if not agreed:
                return RemovalOutcome.DECLINED

        try:
            self._filesystem.unlink(path)
        except RmError:
            # Already one of ours — propagate unchanged.
            raise
        except Exception as exc:
            raise DeleteFailureError(path, str(exc)) from exc

        return RemovalOutcome.REMOVED
