"""Interactive yes/no confirmation for ``rm -i``.

The question goes to stdout without a trailing newline and the answer
is a single line read from stdin, so piped input works the same way as
a terminal.
"""

from __future__ import annotations

import sys

AFFIRMATIVE_ANSWERS: frozenset[str] = frozenset({"y", "yes"})


def _is_affirmative(answer: str) -> bool:
    """Return ``True`` for ``y``/``yes`` in any case, ignoring whitespace."""
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS


def confirm_removal(path: str) -> bool:
    """Ask whether *path* should be removed and block for the answer.

    Returns
    -------
    bool
        ``True`` only for an affirmative answer.  Any other line, an
        empty line, or end of input means "no".

    Raises
    ------
    KeyboardInterrupt
        If the user presses Ctrl+C while the prompt is waiting.
    """
    sys.stdout.write(f"rm: remove file '{path}'? ")
    sys.stdout.flush()
    return _is_affirmative(sys.stdin.readline())
