"""CLI application entry point and driver loop for rmutil.

This module is the **sole error boundary** for the entire application.
It catches :class:`~rmutil.exceptions.RmError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via
the console and returning well-defined exit codes.

Architecture notes
------------------
* No removal logic lives here — each operand is delegated to
  :class:`~rmutil.core.removal_service.RemovalService`.
* stderr output goes through :data:`~rmutil.cli.console.console`;
  stdout carries only prompts, ``removed`` lines, help and version.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence

from rmutil.cli import exit_codes
from rmutil.cli.confirm_prompt import confirm_removal
from rmutil.cli.console import console
from rmutil.cli.usage import HELP_TOKEN, USAGE_TEXT, VERSION_TOKEN, version_text
from rmutil.core.arguments import parse_arguments
from rmutil.core.models import ParsedArguments, RemovalOutcome
from rmutil.core.paths import base_directory, resolve_path
from rmutil.core.removal_service import RemovalService
from rmutil.exceptions import (
    ConfirmationError,
    DeleteFailureError,
    InvalidOptionError,
    LookupFailureError,
    RmError,
    UsageError,
)
from rmutil.infra.local_filesystem import LocalFileSystem


# ---------------------------------------------------------------------------
# Usage errors
# ---------------------------------------------------------------------------

def _print_usage_error(exc: UsageError) -> None:
    """Render a fatal command-line error on stderr."""
    console.error(str(exc))
    if isinstance(exc, InvalidOptionError):
        console.print(USAGE_TEXT, markup=False)
    elif exc.hint:
        console.print(exc.hint, markup=False)


# ---------------------------------------------------------------------------
# Driver loop
# ---------------------------------------------------------------------------

def _remove_operands(
    parsed: ParsedArguments,
    base_dir: str,
    service: RemovalService,
) -> int:
    """Remove every operand in order and return the aggregate exit code.

    A failure is reported once and never stops the remaining operands.
    In force mode every failure is hidden and leaves the code at
    success, so the service's distinction between a missing target
    (``ABSENT``) and a raised lookup failure is not visible here.
    """
    options = parsed.options
    code = exit_codes.SUCCESS

    for operand in parsed.operands:
        path = resolve_path(operand, base_dir)
        try:
            outcome = service.remove(path, options)
        except (LookupFailureError, ConfirmationError, DeleteFailureError) as exc:
            if not options.force:
                console.error(f"cannot remove '{operand}': {exc.reason}")
                code = exit_codes.GENERAL_ERROR
            continue

        if outcome is RemovalOutcome.REMOVED and options.verbose:
            print(f"removed '{path}'")

    return code


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Run the rm CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    environ:
        Environment used to find the base directory (``PWD``).  When
        ``None`` (default), :data:`os.environ` is used.

    Returns
    -------
    int
        OS process exit code.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    env = os.environ if environ is None else environ

    if not args:
        console.print(USAGE_TEXT, markup=False)
        return exit_codes.GENERAL_ERROR

    if args == [HELP_TOKEN]:
        print(USAGE_TEXT)
        return exit_codes.SUCCESS
    if args == [VERSION_TOKEN]:
        print(version_text())
        return exit_codes.SUCCESS

    try:
        parsed = parse_arguments(args)
    except UsageError as exc:
        _print_usage_error(exc)
        return exit_codes.GENERAL_ERROR

    service = RemovalService(LocalFileSystem(), confirm_removal)
    return _remove_operands(parsed, base_directory(env), service)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except RmError as exc:
        console.error(str(exc))
        if exc.hint:
            console.print(exc.hint, markup=False)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print()
        console.error("interrupted")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.error(f"unexpected error: {type(exc).__name__}: {exc}")
        console.print("Please report this issue.", markup=False)
        sys.exit(exit_codes.UNEXPECTED_ERROR)
