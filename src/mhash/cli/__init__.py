"""mhash CLI - Command-line interface for mhash."""

from __future__ import annotations

from mhash.cli.base import cli
from mhash.cli.cmds import digest
from mhash.cli.cmds import inspect
from mhash.cli.cmds import list_variants
from mhash.cli.cmds import verify

__all__ = ["cli", "digest", "inspect", "list_variants", "verify"]


if __name__ == "__main__":
    cli()
