from __future__ import annotations

import logging

import click

import mhash
from mhash.cli.cmds import digest
from mhash.cli.cmds import inspect
from mhash.cli.cmds import list_variants
from mhash.cli.cmds import verify


@click.group(context_settings={"help_option_names": ["-h", "--help"], "max_content_width": 120})
@click.version_option(version=mhash.__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """mhash - Inspect, generate and verify self-describing multihash digests."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


cli.add_command(inspect)
cli.add_command(digest)
cli.add_command(verify)
cli.add_command(list_variants)
