"""Custom exception hierarchy for rmutil.

All exceptions that cross layer boundaries must inherit from
:class:`RmError`.  Raw ``OSError`` instances must NEVER propagate beyond
the infrastructure layer — they are caught there and re-raised as a
typed subclass defined here.

Hierarchy
---------
RmError
├── UsageError
│   ├── InvalidOptionError
│   └── MissingOperandError
├── LookupFailureError
├── ConfirmationError
└── DeleteFailureError
"""

from __future__ import annotations


class RmError(Exception):
    """Base exception for all rmutil errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class UsageError(RmError):
    """Raised when the command line cannot be turned into a removal run.

    Usage errors abort the whole invocation before any file is touched.
    """


class InvalidOptionError(UsageError):
    """Raised when a flag cluster contains an unknown letter."""

    def __init__(self, option: str) -> None:
        super().__init__(f"invalid option -- '{option}'")
        self.option: str = option


class MissingOperandError(UsageError):
    """Raised when no file operand was supplied."""

    def __init__(self) -> None:
        super().__init__(
            "missing operand",
            hint="Try 'rm --help' for more information.",
        )


# --- Per-file failures -----------------------------------------------------

class LookupFailureError(RmError):
    """Raised when the metadata of a target cannot be read."""

    def __init__(self, path: str, reason: str, *, missing: bool = False) -> None:
        super().__init__(reason)
        self.path: str = path
        self.reason: str = reason
        self.missing: bool = missing
        """``True`` when the lookup failed because the target does not exist."""


class DeleteFailureError(RmError):
    """Raised when unlinking a target fails."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(reason)
        self.path: str = path
        self.reason: str = reason


class ConfirmationError(RmError):
    """Raised when the interactive answer for a target cannot be read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(reason)
        self.path: str = path
        self.reason: str = reason
