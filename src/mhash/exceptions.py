"""
Centralized exception classes for the mhash library.

All mhash-specific exceptions inherit from MultihashError for easy catching.
"""

from __future__ import annotations


class MultihashError(Exception):
    """Base exception for all mhash errors."""


# region Creation


class CreationError(MultihashError):
    """Raised when a variant or multihash cannot be constructed."""


class UnknownCodeError(CreationError):
    """Raised when a code is neither a documented hash function nor application specific."""

    def __init__(self, code: int | str) -> None:
        self.code = code
        if isinstance(code, int):
            super().__init__(f"unknown multihash code: {code:#x}")
        else:
            super().__init__(f"unknown multihash name: {code!r}")


class LengthTooLongError(CreationError):
    """Raised when a digest is longer than its variant allows."""

    def __init__(self, length: int, max_length: int, name: str) -> None:
        self.length = length
        self.max_length = max_length
        self.name = name
        super().__init__(
            f"multihash length {length} longer than max length {max_length} for hash kind {name}"
        )


# region Decoding


class DecodeError(MultihashError):
    """Raised when binary input cannot be decoded into a multihash."""


class TruncatedInputError(DecodeError):
    """Raised when the input ends before a varint or the digest is complete."""


class TrailingOrMissingBytesError(DecodeError):
    """Raised when a whole buffer does not hold exactly one multihash."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected} digest bytes, buffer holds {actual}")


class VarintError(DecodeError):
    """Raised when a varint field is malformed."""


class VarintOverflowError(VarintError):
    """Raised when a varint exceeds the largest value the format can represent."""


class NonCanonicalVarintError(VarintError):
    """Raised when a varint uses more bytes than its value needs."""


# region Validation / generation


class ValidationError(MultihashError):
    """Raised when a validator fails to run (not when a digest mismatches)."""


class DigestTooLongError(ValidationError):
    """Raised when a digest is longer than the hash it is validated against."""

    def __init__(self, length: int, max_length: int) -> None:
        self.length = length
        self.max_length = max_length
        super().__init__(f"digest of {length} bytes is longer than the {max_length} byte hash")


class GenerationError(MultihashError):
    """Raised when a multihash cannot be generated."""


class UnsupportedVariantError(GenerationError):
    """Raised when no generator is registered for the requested variant."""


# region Text / registries


class TextDecodeError(MultihashError):
    """Raised when a textual multihash is not valid Base58."""


class RegistryError(MultihashError):
    """Raised when a validator or generator registry is misused."""


class RegistryFrozenError(RegistryError):
    """Raised when registering into a registry whose initialization window has closed."""
