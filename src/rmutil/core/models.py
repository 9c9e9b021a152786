"""Domain models for rmutil.

All models are **frozen** dataclasses — immutable value objects built
once per run and read-only thereafter.  They carry zero I/O and no
dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RemoveOptions:
    """Behaviour switches selected on the command line.

    Use :meth:`from_flags` rather than the constructor when building
    from user input: it applies the interactive-over-force precedence.
    """

    force: bool = False
    """Never prompt; a missing target counts as success."""

    interactive: bool = False
    """Ask for confirmation before every removal."""

    verbose: bool = False
    """Report each removed file on stdout."""

    @classmethod
    def from_flags(
        cls,
        *,
        force: bool = False,
        interactive: bool = False,
        verbose: bool = False,
    ) -> RemoveOptions:
        """Build options, dropping ``force`` when ``interactive`` is requested."""
        return cls(
            force=force and not interactive,
            interactive=interactive,
            verbose=verbose,
        )


# ---------------------------------------------------------------------------
# Parser result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedArguments:
    """Result of parsing the argument vector."""

    options: RemoveOptions
    operands: tuple[str, ...]
    """File operands exactly as given, in command-line order."""


# ---------------------------------------------------------------------------
# Per-operand result
# ---------------------------------------------------------------------------

class RemovalOutcome(enum.Enum):
    """What happened to a single operand that did not fail."""

    REMOVED = "removed"
    DECLINED = "declined"
    ABSENT = "absent"
