"""``python -m rmutil`` — same behaviour as the ``pyrm`` console script."""

from __future__ import annotations

from rmutil.cli.app import cli

if __name__ == "__main__":
    cli()
