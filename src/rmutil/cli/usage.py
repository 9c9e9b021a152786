"""Help and version text."""

from __future__ import annotations

from rmutil.version import __version__

HELP_TOKEN: str = "--help"
VERSION_TOKEN: str = "--version"

USAGE_TEXT: str = "\n".join(
    (
        "Usage: rm [OPTION]... FILE...",
        "Remove (unlink) the FILE(s).",
        "",
        "  -f    Attempt to remove the files without prompting for confirmation",
        "  -i    Request confirmation before attempting to remove each file",
        "  -v    Be verbose when deleting files, showing them as they are removed",
        "",
        "      --help     display this help and exit",
        "      --version  output version information and exit",
    )
)


def version_text() -> str:
    """Return the one-line ``--version`` banner."""
    return f"rm (rmutil) {__version__}"
