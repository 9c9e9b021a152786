"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No direct filesystem access; go through ``FileSystemProvider``.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from rmutil.core.arguments import parse_arguments
from rmutil.core.models import ParsedArguments, RemovalOutcome, RemoveOptions
from rmutil.core.paths import base_directory, resolve_path
from rmutil.core.protocols import Confirmer, FileSystemProvider
from rmutil.core.removal_service import RemovalService

__all__: list[str] = [
    "Confirmer",
    "FileSystemProvider",
    "ParsedArguments",
    "RemovalOutcome",
    "RemovalService",
    "RemoveOptions",
    "base_directory",
    "parse_arguments",
    "resolve_path",
]
