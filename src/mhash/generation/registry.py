"""Registry of generators keyed by variant."""

from __future__ import annotations

import logging

from mhash.exceptions import UnsupportedVariantError
from mhash.generation.base import Generator
from mhash.multihash import MultiHash
from mhash.registry import VariantTable
from mhash.variants import SHA2_256
from mhash.variants import Variant
from mhash.variants import resolve

logger = logging.getLogger(__name__)

DEFAULT_VARIANT = SHA2_256
"""Variant used when callers do not pick one."""


class GenerationRegistry(VariantTable[Generator]):
    """
    Generators keyed by variant, plus a default variant for callers indifferent to the algorithm.

    Args:
        default_variant: Variant used by ``generate`` when none is given. Defaults to sha2-256.

    Examples:
        >>> import hashlib
        >>> from mhash.generation.base import HashGenerator
        >>> registry = GenerationRegistry()
        >>> registry.register("sha2-256", HashGenerator(lambda d: hashlib.sha256(d).digest()))
        >>> mh = registry.generate(b"hello")
        >>> mh.name, len(mh)
        ('sha2-256', 32)
    """

    kind = "generator"

    def __init__(self, default_variant: Variant | int | str = DEFAULT_VARIANT) -> None:
        super().__init__()
        self.default_variant = resolve(default_variant)

    def generate(self, data: bytes, variant: Variant | int | str | None = None) -> MultiHash:
        """
        Hash ``data`` and wrap the full digest in a MultiHash.

        Args:
            data: Bytes to hash.
            variant: Variant, code or name; the registry's default variant when None.

        Raises:
            UnsupportedVariantError: If no generator is registered for the variant.
            LengthTooLongError: If the generator returns more bytes than the variant allows.
        """
        resolved = self.default_variant if variant is None else resolve(variant)
        generator = self._entries.get(resolved)
        if generator is None:
            raise UnsupportedVariantError(f"no generator registered for {resolved}")
        return MultiHash(resolved, generator.digest(data))


__all__ = ["DEFAULT_VARIANT", "GenerationRegistry"]
