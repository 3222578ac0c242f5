"""mhash: self-describing multihash digests with pluggable validation and generation."""

__version__ = "0.1.0"

from . import settings
from . import variants
from .codec import decode
from .codec import decode_strict
from .codec import encode
from .codec import encoded_len
from .codec import iter_multihashes
from .codec import read_multihash
from .codec import write_multihash
from .generation import GenerationRegistry
from .multihash import MultiHash
from .plugins import create_generation_registry
from .plugins import create_validation_registry
from .text import from_base58
from .text import to_base58
from .validation import ValidationRegistry
from .variants import Category
from .variants import Variant

__all__ = [
    "Category",
    "GenerationRegistry",
    "MultiHash",
    "ValidationRegistry",
    "Variant",
    "create_generation_registry",
    "create_validation_registry",
    "decode",
    "decode_strict",
    "encode",
    "encoded_len",
    "from_base58",
    "iter_multihashes",
    "read_multihash",
    "settings",
    "to_base58",
    "variants",
    "write_multihash",
]
