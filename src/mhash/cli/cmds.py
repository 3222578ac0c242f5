"""CLI commands for inspecting, generating and verifying multihashes."""

from __future__ import annotations

from typing import BinaryIO

import click

from mhash.cli._shared import describe
from mhash.cli._shared import describe_variant
from mhash.cli._shared import format_multihash
from mhash.cli._shared import parse_multihash
from mhash.cli._shared import variant_choices
from mhash.exceptions import MultihashError
from mhash.plugins import create_generation_registry
from mhash.plugins import create_validation_registry
from mhash.variants import APP_SPECIFIC_MAX
from mhash.variants import APP_SPECIFIC_MIN
from mhash.variants import REGISTRY


@click.command()
@click.argument("multihash")
@click.option("--hex", "as_hex", is_flag=True, help="Parse MULTIHASH as hex instead of Base58.")
def inspect(multihash: str, as_hex: bool) -> None:
    r"""
    Print the parsed structure of a multihash.

    Examples:
    \b
    mhash inspect QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG
    mhash inspect --hex 1104deadbeef
    """
    parsed = parse_multihash(multihash, as_hex=as_hex)
    for label, value in describe(parsed):
        click.echo(f"{label + ':':<16}{value}")


@click.command()
@click.argument("file", type=click.File("rb"), default="-")
@click.option(
    "--variant",
    "-V",
    type=click.Choice(variant_choices()),
    default=None,
    help="Hash function to use. Defaults to the configured default variant.",
)
@click.option("--hex", "as_hex", is_flag=True, help="Print the multihash as hex instead of Base58.")
def digest(file: BinaryIO, variant: str | None, as_hex: bool) -> None:
    r"""
    Generate the multihash of FILE (standard input by default).

    Examples:
    \b
    mhash digest README.md
    echo -n hello | mhash digest --variant blake2b
    """
    registry = create_generation_registry()
    try:
        multihash = registry.generate(file.read(), variant)
    except MultihashError as e:
        raise click.ClickException(str(e)) from e
    click.echo(format_multihash(multihash, as_hex=as_hex))


@click.command()
@click.argument("multihash")
@click.argument("file", type=click.File("rb"), default="-")
@click.option("--hex", "as_hex", is_flag=True, help="Parse MULTIHASH as hex instead of Base58.")
@click.pass_context
def verify(ctx: click.Context, multihash: str, file: BinaryIO, as_hex: bool) -> None:
    r"""
    Check that FILE (standard input by default) matches MULTIHASH.

    Exits with status 0 on a match and 1 on a mismatch.

    Examples:
    \b
    mhash verify QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG data.bin
    """
    parsed = parse_multihash(multihash, as_hex=as_hex)
    registry = create_validation_registry()
    try:
        result = registry.validate(parsed, file.read())
    except MultihashError as e:
        raise click.ClickException(str(e)) from e

    if result is None:
        raise click.ClickException(f"no validator available for {parsed.variant}")
    if result:
        click.echo("OK")
    else:
        click.echo("MISMATCH")
        ctx.exit(1)


@click.command("variants")
def list_variants() -> None:
    """List the known multihash variants."""
    for variant in REGISTRY:
        click.echo(describe_variant(variant))
    click.echo(f"{APP_SPECIFIC_MIN:#06x}-{APP_SPECIFIC_MAX:#06x}  app-specific  unbounded")
