"""
Validators recompute a hash over data and compare it against a stored digest.

A stored digest may be truncated, so validators compare it against the same-length prefix of the
recomputed hash. A digest longer than the recomputed hash cannot be compared and is an error
rather than a mismatch.
"""

from __future__ import annotations

from abc import ABC
from abc import abstractmethod

from typing_extensions import override

from mhash.exceptions import DigestTooLongError
from mhash.hashes import HashFunction
from mhash.hashes import shake_digest
from mhash.utils import as_bytes
from mhash.variants import SHAKE_128
from mhash.variants import SHAKE_256
from mhash.variants import Variant


class Validator(ABC):
    """Checks a digest against the data it claims to describe."""

    @abstractmethod
    def validate(self, digest: bytes, data: bytes) -> bool:
        """
        Check ``digest`` against ``data``.

        Args:
            digest: Stored digest bytes, possibly a prefix of the full hash.
            data: The original data.

        Returns:
            True when the digest matches, False otherwise.

        Raises:
            DigestTooLongError: If the digest is longer than the hash can be.
        """
        ...


def prefix_matches(digest: bytes, full: bytes) -> bool:
    """
    Compare ``digest`` with the same-length prefix of ``full``.

    Examples:
        >>> prefix_matches(b"\\x01\\x02", b"\\x01\\x02\\x03")
        True
        >>> prefix_matches(b"\\x01\\x03", b"\\x01\\x02\\x03")
        False
    """
    if len(digest) > len(full):
        raise DigestTooLongError(len(digest), len(full))
    return digest == full[: len(digest)]


class HashValidator(Validator):
    """
    Validator for fixed-output hash functions.

    Examples:
        >>> import hashlib
        >>> validator = HashValidator(lambda d: hashlib.sha256(d).digest())
        >>> validator.validate(hashlib.sha256(b"abc").digest()[:4], b"abc")
        True
    """

    def __init__(self, hash_fn: HashFunction) -> None:
        self.hash_fn = hash_fn

    @override
    def validate(self, digest: bytes, data: bytes) -> bool:
        return prefix_matches(as_bytes(digest, "digest"), self.hash_fn(as_bytes(data)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({getattr(self.hash_fn, '__name__', self.hash_fn)!r})"


class ShakeValidator(Validator):
    """
    Validator for SHAKE extendable-output functions.

    SHAKE output is prefix consistent, so the hash is recomputed at exactly the digest's length and
    any digest length can be checked.
    """

    def __init__(self, variant: Variant) -> None:
        if variant not in (SHAKE_128, SHAKE_256):
            raise ValueError(f"{variant} is not a SHAKE variant")
        self.variant = variant

    @override
    def validate(self, digest: bytes, data: bytes) -> bool:
        digest = as_bytes(digest, "digest")
        return digest == shake_digest(self.variant, as_bytes(data), len(digest))

    def __repr__(self) -> str:
        return f"ShakeValidator({self.variant.name!r})"


class IdentityValidator(Validator):
    """Validator for the identity variant: the digest is a copy, or a prefix, of the data."""

    @override
    def validate(self, digest: bytes, data: bytes) -> bool:
        return prefix_matches(as_bytes(digest, "digest"), as_bytes(data))

    def __repr__(self) -> str:
        return "IdentityValidator()"


__all__ = [
    "HashValidator",
    "IdentityValidator",
    "ShakeValidator",
    "Validator",
    "prefix_matches",
]
