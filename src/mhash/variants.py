"""
The multihash variant table.

A Variant identifies one hash kind by its numeric code, canonical name, maximum digest length and
category. The table of documented variants is built once at import time and exposed read-only
through ``REGISTRY``.

Codes follow the varint revision of the multihash format: application specific codes occupy the
range ``0x0400..0x040f`` and every other code must be one of the documented functions.

Examples:
    >>> from_code(0x12).name
    'sha2-256'
    >>> from_name("blake2b").max_len
    64
    >>> from_code(0x0401).category
    <Category.APPLICATION_SPECIFIC: 'application-specific'>
"""

from __future__ import annotations

from collections.abc import Iterable
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from mhash.exceptions import UnknownCodeError
from mhash.varint import MAX_VARINT_VALUE

APP_SPECIFIC_MIN = 0x0400
APP_SPECIFIC_MAX = 0x040F
APP_SPECIFIC_NAME = "app-specific"

UNBOUNDED = MAX_VARINT_VALUE
"""Maximum digest length of variants with no registry-imposed ceiling (the format limit)."""


class Category(Enum):
    """Which part of the code space a variant belongs to."""

    STANDARD = "standard"
    APPLICATION_SPECIFIC = "application-specific"
    UNKNOWN = "unknown"


def is_app_code(code: int) -> bool:
    """Whether ``code`` lies in the reserved application specific range."""
    return APP_SPECIFIC_MIN <= code <= APP_SPECIFIC_MAX


@dataclass(frozen=True)
class Variant:
    """One recognized (code, name, max length) triple."""

    code: int
    name: str
    max_len: int
    category: Category = Category.STANDARD

    def __post_init__(self) -> None:
        if not 0 <= self.code <= MAX_VARINT_VALUE:
            raise UnknownCodeError(self.code)
        if self.category is Category.APPLICATION_SPECIFIC and not is_app_code(self.code):
            raise UnknownCodeError(self.code)
        if self.max_len < 0:
            raise ValueError(f"max_len must be non-negative, got {self.max_len}")

    @classmethod
    def application_specific(cls, code: int) -> Variant:
        """Build the variant for an application specific code, rejecting codes outside the range."""
        return cls(code, APP_SPECIFIC_NAME, UNBOUNDED, Category.APPLICATION_SPECIFIC)

    @property
    def is_unbounded(self) -> bool:
        return self.max_len == UNBOUNDED

    def __str__(self) -> str:
        if self.category is Category.APPLICATION_SPECIFIC:
            return f"{self.name}({self.code:#06x})"
        return self.name


IDENTITY = Variant(0x00, "identity", UNBOUNDED)
SHA1 = Variant(0x11, "sha1", 20)
SHA2_256 = Variant(0x12, "sha2-256", 32)
SHA2_512 = Variant(0x13, "sha2-512", 64)
SHA3_512 = Variant(0x14, "sha3-512", 64)
SHA3_384 = Variant(0x15, "sha3-384", 48)
SHA3_256 = Variant(0x16, "sha3-256", 32)
SHA3_224 = Variant(0x17, "sha3-224", 28)
SHAKE_128 = Variant(0x18, "shake-128", UNBOUNDED)
SHAKE_256 = Variant(0x19, "shake-256", UNBOUNDED)
BLAKE2B = Variant(0x40, "blake2b", 64)
BLAKE2S = Variant(0x41, "blake2s", 32)

STANDARD_VARIANTS: tuple[Variant, ...] = (
    IDENTITY,
    SHA1,
    SHA2_256,
    SHA2_512,
    SHA3_512,
    SHA3_384,
    SHA3_256,
    SHA3_224,
    SHAKE_128,
    SHAKE_256,
    BLAKE2B,
    BLAKE2S,
)


class VariantRegistry:
    """
    Constant lookup table from codes and names to variants.

    The registry only ever holds documented variants; application specific variants are built on
    demand by ``from_code`` since any code in the reserved range is valid.
    """

    def __init__(self, variants: Iterable[Variant]) -> None:
        by_code: dict[int, Variant] = {}
        for variant in variants:
            if variant.category is not Category.STANDARD:
                raise ValueError(f"only standard variants can be tabled, got {variant!r}")
            if variant.code in by_code:
                raise ValueError(f"duplicate code {variant.code:#x} for {variant.name!r}")
            by_code[variant.code] = variant
        self._by_code = MappingProxyType(by_code)
        self._by_name = MappingProxyType({v.name: v for v in by_code.values()})

    def from_code(self, code: int) -> Variant:
        """
        Return the variant for ``code``.

        Raises:
            UnknownCodeError: If the code is neither documented nor application specific.
        """
        variant = self._by_code.get(code)
        if variant is not None:
            return variant
        if is_app_code(code):
            return Variant.application_specific(code)
        raise UnknownCodeError(code)

    def from_name(self, name: str) -> Variant:
        """
        Return the documented variant with canonical ``name``.

        Raises:
            UnknownCodeError: If no variant has that name.
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownCodeError(name) from None

    def classify(self, code: int) -> Category:
        """Category of ``code``, ``UNKNOWN`` when the code would be rejected."""
        if code in self._by_code:
            return Category.STANDARD
        if is_app_code(code):
            return Category.APPLICATION_SPECIFIC
        return Category.UNKNOWN

    def max_len(self, variant: Variant) -> int:
        return variant.max_len

    def name(self, variant: Variant) -> str:
        return variant.name

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __iter__(self) -> Iterator[Variant]:
        return iter(self._by_code.values())

    def __len__(self) -> int:
        return len(self._by_code)


REGISTRY = VariantRegistry(STANDARD_VARIANTS)


def from_code(code: int) -> Variant:
    """Look up a variant by code in the standard registry."""
    return REGISTRY.from_code(code)


def from_name(name: str) -> Variant:
    """Look up a variant by canonical name in the standard registry."""
    return REGISTRY.from_name(name)


def resolve(variant: Variant | int | str) -> Variant:
    """Coerce a Variant, code or canonical name into a Variant."""
    if isinstance(variant, Variant):
        return variant
    if isinstance(variant, bool):
        raise TypeError("variant must be a Variant, int code or str name, not bool")
    if isinstance(variant, int):
        return from_code(variant)
    if isinstance(variant, str):
        return from_name(variant)
    raise TypeError(f"variant must be a Variant, int code or str name, not {type(variant).__name__}")


__all__ = [
    "APP_SPECIFIC_MAX",
    "APP_SPECIFIC_MIN",
    "BLAKE2B",
    "BLAKE2S",
    "Category",
    "IDENTITY",
    "REGISTRY",
    "SHA1",
    "SHA2_256",
    "SHA2_512",
    "SHA3_224",
    "SHA3_256",
    "SHA3_384",
    "SHA3_512",
    "SHAKE_128",
    "SHAKE_256",
    "STANDARD_VARIANTS",
    "UNBOUNDED",
    "Variant",
    "VariantRegistry",
    "from_code",
    "from_name",
    "is_app_code",
    "resolve",
]
