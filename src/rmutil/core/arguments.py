"""Command-line argument parsing.

``rm`` accepts clustered short flags (``-fv``) anywhere on the command
line, mixed freely with file operands.  :mod:`argparse` treats ``--``
and lone ``-`` specially and cannot reject unknown letters inside a
cluster with the required message, so the vector is scanned by hand.

Guarantees
----------
* Pure — no I/O, no ``print()``, no ``sys.exit``.
* Failures are raised as :class:`~rmutil.exceptions.UsageError`
  subclasses for the CLI layer to render.
"""

from __future__ import annotations

from collections.abc import Sequence

from rmutil.core.models import ParsedArguments, RemoveOptions
from rmutil.exceptions import InvalidOptionError, MissingOperandError

FLAG_PREFIX: str = "-"

KNOWN_FLAGS: frozenset[str] = frozenset({"f", "i", "v"})
"""Single-letter flags: force, interactive, verbose."""


def parse_arguments(argv: Sequence[str]) -> ParsedArguments:
    """Split *argv* into options and operands.

    Parameters
    ----------
    argv:
        The argument vector without the program name.

    Returns
    -------
    ParsedArguments
        Options with interactive-over-force precedence applied, and the
        operands in their original order (duplicates kept).

    Raises
    ------
    InvalidOptionError
        On the first flag letter outside :data:`KNOWN_FLAGS`.
    MissingOperandError
        When no operand is present.
    """
    seen: set[str] = set()
    operands: list[str] = []

    for token in argv:
        if token.startswith(FLAG_PREFIX):
            for letter in token[1:]:
                if letter not in KNOWN_FLAGS:
                    raise InvalidOptionError(letter)
                seen.add(letter)
        else:
            operands.append(token)

    if not operands:
        raise MissingOperandError()

    options = RemoveOptions.from_flags(
        force="f" in seen,
        interactive="i" in seen,
        verbose="v" in seen,
    )
    return ParsedArguments(options=options, operands=tuple(operands))
