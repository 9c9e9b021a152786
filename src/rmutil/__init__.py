"""rmutil — remove (unlink) files from the command line.

A small ``rm`` work-alike built with a strict layered architecture.
"""

from rmutil.version import __version__

__all__: list[str] = ["__version__"]
