"""
Built-in plugin registering ``hashlib`` validators and generators for every standard variant.
"""

from __future__ import annotations

from collections.abc import Iterator

from mhash.generation.base import Generator
from mhash.generation.base import HashGenerator
from mhash.hashes import FIXED_OUTPUT_VARIANTS
from mhash.hashes import SHAKE_VARIANTS
from mhash.hashes import hashlib_function
from mhash.hashes import native_function
from mhash.validation.base import HashValidator
from mhash.validation.base import IdentityValidator
from mhash.validation.base import ShakeValidator
from mhash.validation.base import Validator
from mhash.variants import IDENTITY
from mhash.variants import STANDARD_VARIANTS
from mhash.variants import Variant

from .markers import hook_impl


class HashlibPlugin:
    """Validators and generators backed by the standard library ``hashlib`` module."""

    @hook_impl
    def mhash_register_validators(self) -> Iterator[tuple[Variant, Validator]]:
        yield IDENTITY, IdentityValidator()
        for variant in FIXED_OUTPUT_VARIANTS:
            yield variant, HashValidator(hashlib_function(variant))
        for variant in SHAKE_VARIANTS:
            yield variant, ShakeValidator(variant)

    @hook_impl
    def mhash_register_generators(self) -> Iterator[tuple[Variant, Generator]]:
        for variant in STANDARD_VARIANTS:
            yield variant, HashGenerator(native_function(variant))

    def __repr__(self) -> str:
        return "HashlibPlugin()"


__all__ = ["HashlibPlugin"]
