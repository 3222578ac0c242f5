"""The MultiHash value type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mhash import variants
from mhash.exceptions import CreationError
from mhash.exceptions import LengthTooLongError
from mhash.exceptions import UnknownCodeError
from mhash.utils import as_bytes
from mhash.utils import build_repr
from mhash.variants import Category
from mhash.variants import Variant

if TYPE_CHECKING:
    from mhash.validation.registry import ValidationRegistry


@dataclass(frozen=True)
class MultiHash:
    """
    An immutable (variant, digest) pair.

    Construction validates the pair: the variant must be a registered or application specific one
    and the digest must be no longer than the variant's maximum length. Digests are stored exactly
    as given, with no truncation or padding. Decoding and generation both construct through here,
    so every MultiHash in existence satisfies these checks.

    Two multihashes are equal only when both code and digest bytes (including length) match.

    Examples:
        >>> from mhash.variants import SHA1
        >>> mh = MultiHash(SHA1, b"\\xde\\xad\\xbe\\xef")
        >>> mh.code, mh.name, len(mh)
        (17, 'sha1', 4)
        >>> mh.to_bytes().hex()
        '1104deadbeef'
        >>> MultiHash(SHA1, bytes(21))
        Traceback (most recent call last):
        ...
        mhash.exceptions.LengthTooLongError: multihash length 21 longer than max length 20 for hash kind sha1
    """

    variant: Variant
    digest: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.variant, Variant):
            raise TypeError(f"variant must be a Variant, not {type(self.variant).__name__}")
        if self.variant.category is Category.UNKNOWN:
            raise UnknownCodeError(self.variant.code)
        registered = variants.from_code(self.variant.code)
        if registered != self.variant:
            raise CreationError(
                f"variant {self.variant!r} does not match the registered {registered!r}"
            )

        digest = as_bytes(self.digest, "digest")
        if len(digest) > self.variant.max_len:
            raise LengthTooLongError(len(digest), self.variant.max_len, self.variant.name)
        object.__setattr__(self, "digest", digest)

    @classmethod
    def with_code(cls, code: int, digest: bytes) -> MultiHash:
        """Build a multihash from a numeric code, looking the variant up first."""
        return cls(variants.from_code(code), digest)

    @classmethod
    def with_name(cls, name: str, digest: bytes) -> MultiHash:
        """Build a multihash from a canonical variant name."""
        return cls(variants.from_name(name), digest)

    @property
    def code(self) -> int:
        return self.variant.code

    @property
    def name(self) -> str:
        return self.variant.name

    def __len__(self) -> int:
        return len(self.digest)

    # region Encoding

    @classmethod
    def from_bytes(cls, buffer: bytes) -> MultiHash:
        """Decode a buffer holding exactly one binary multihash."""
        from mhash.codec import decode_strict

        return decode_strict(buffer)

    def to_bytes(self) -> bytes:
        from mhash.codec import encode

        return encode(self)

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    @property
    def encoded_len(self) -> int:
        """Length of ``to_bytes()``, computed without encoding."""
        from mhash.codec import encoded_len

        return encoded_len(self)

    @classmethod
    def from_base58(cls, text: str) -> MultiHash:
        from mhash.text import from_base58

        return from_base58(text)

    def to_base58(self) -> str:
        from mhash.text import to_base58

        return to_base58(self)

    def __str__(self) -> str:
        return self.to_base58()

    def __repr__(self) -> str:
        return build_repr("MultiHash", str(self.variant), repr(self.digest.hex()))

    # region Validation

    def validate(self, data: bytes, registry: ValidationRegistry) -> bool | None:
        """
        Check this multihash against ``data`` using the validator registered for its variant.

        Returns:
            True on a match, False on a mismatch, None when ``registry`` has no validator for the
            variant.

        Raises:
            DigestTooLongError: If the digest is longer than the recomputed hash.
        """
        return registry.validate(self, data)


__all__ = ["MultiHash"]
