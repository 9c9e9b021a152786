"""Infrastructure layer — operating-system integration.

This layer wraps all interaction with the local filesystem.  Every raw
``OSError`` must be caught here and re-raised as a
:class:`~rmutil.exceptions.RmError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from rmutil.infra.local_filesystem import LocalFileSystem, describe_os_error

__all__: list[str] = [
    "LocalFileSystem",
    "describe_os_error",
]
