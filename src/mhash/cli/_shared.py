"""Helpers shared by the CLI commands."""

from __future__ import annotations

import click

from mhash.exceptions import MultihashError
from mhash.multihash import MultiHash
from mhash.variants import REGISTRY
from mhash.variants import Variant


def parse_multihash(value: str, as_hex: bool = False) -> MultiHash:
    """Parse a textual multihash argument, converting library errors into click errors."""
    try:
        if as_hex:
            try:
                data = bytes.fromhex(value)
            except ValueError as e:
                raise click.BadParameter(f"'{value}' is not valid hex: {e}") from e
            return MultiHash.from_bytes(data)
        return MultiHash.from_base58(value)
    except MultihashError as e:
        raise click.BadParameter(f"{type(e).__name__}: {e}") from e


def format_multihash(multihash: MultiHash, as_hex: bool = False) -> str:
    return multihash.to_bytes().hex() if as_hex else multihash.to_base58()


def describe(multihash: MultiHash) -> list[tuple[str, str]]:
    """Rows describing the parsed structure of ``multihash``."""
    variant = multihash.variant
    return [
        ("code", f"{variant.code:#04x}"),
        ("name", variant.name),
        ("category", variant.category.value),
        ("length", str(len(multihash))),
        ("max length", "unbounded" if variant.is_unbounded else str(variant.max_len)),
        ("digest", multihash.digest.hex()),
        ("encoded length", str(multihash.encoded_len)),
    ]


def describe_variant(variant: Variant) -> str:
    max_len = "unbounded" if variant.is_unbounded else str(variant.max_len)
    return f"{variant.code:#06x}  {variant.name:<12}  {max_len}"


def variant_choices() -> list[str]:
    return [variant.name for variant in REGISTRY]
