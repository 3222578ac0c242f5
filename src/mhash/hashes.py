"""
Hash function providers for the standard variants.

All providers are thin wrappers over ``hashlib``; mhash implements no hash algorithm itself. Each
provider has the shape ``hash(data) -> bytes`` and returns the variant's native output.

Extendable-output functions (SHAKE) have no fixed output, so ``shake_digest`` is exposed separately
for callers that need a specific length. Their native generation lengths are 32 bytes for shake-128
and 64 bytes for shake-256.
"""

from __future__ import annotations

import hashlib
from typing import Callable

from typing_extensions import TypeAlias

from mhash.variants import BLAKE2B
from mhash.variants import BLAKE2S
from mhash.variants import IDENTITY
from mhash.variants import SHA1
from mhash.variants import SHA2_256
from mhash.variants import SHA2_512
from mhash.variants import SHA3_224
from mhash.variants import SHA3_256
from mhash.variants import SHA3_384
from mhash.variants import SHA3_512
from mhash.variants import SHAKE_128
from mhash.variants import SHAKE_256
from mhash.variants import Variant

HashFunction: TypeAlias = Callable[[bytes], bytes]

SHAKE_NATIVE_LENGTHS: dict[Variant, int] = {
    SHAKE_128: 32,
    SHAKE_256: 64,
}

_HASHLIB_NAMES: dict[Variant, str] = {
    SHA1: "sha1",
    SHA2_256: "sha256",
    SHA2_512: "sha512",
    SHA3_512: "sha3_512",
    SHA3_384: "sha3_384",
    SHA3_256: "sha3_256",
    SHA3_224: "sha3_224",
    BLAKE2B: "blake2b",
    BLAKE2S: "blake2s",
}

_SHAKE_NAMES: dict[Variant, str] = {
    SHAKE_128: "shake_128",
    SHAKE_256: "shake_256",
}


def hashlib_function(variant: Variant) -> HashFunction:
    """
    Return the ``hashlib`` provider for a fixed-output variant.

    Raises:
        KeyError: If the variant has no fixed-output hashlib algorithm.
    """
    algorithm = _HASHLIB_NAMES[variant]

    def hash_data(data: bytes) -> bytes:
        return hashlib.new(algorithm, data).digest()

    hash_data.__name__ = f"hash_{algorithm}"
    return hash_data


def shake_digest(variant: Variant, data: bytes, length: int) -> bytes:
    """Compute ``length`` bytes of SHAKE output for ``data``."""
    return hashlib.new(_SHAKE_NAMES[variant], data).digest(length)


def shake_function(variant: Variant) -> HashFunction:
    """Return a provider computing the native generation length of a SHAKE variant."""
    length = SHAKE_NATIVE_LENGTHS[variant]

    def hash_data(data: bytes) -> bytes:
        return shake_digest(variant, data, length)

    hash_data.__name__ = f"hash_{_SHAKE_NAMES[variant]}"
    return hash_data


def identity(data: bytes) -> bytes:
    """The identity "hash": the data itself."""
    return bytes(data)


def native_function(variant: Variant) -> HashFunction:
    """Return the provider producing the native-length digest for any standard variant."""
    if variant == IDENTITY:
        return identity
    if variant in _SHAKE_NAMES:
        return shake_function(variant)
    return hashlib_function(variant)


FIXED_OUTPUT_VARIANTS: tuple[Variant, ...] = tuple(_HASHLIB_NAMES)
SHAKE_VARIANTS: tuple[Variant, ...] = tuple(_SHAKE_NAMES)


__all__ = [
    "FIXED_OUTPUT_VARIANTS",
    "HashFunction",
    "SHAKE_NATIVE_LENGTHS",
    "SHAKE_VARIANTS",
    "hashlib_function",
    "identity",
    "native_function",
    "shake_digest",
    "shake_function",
]
