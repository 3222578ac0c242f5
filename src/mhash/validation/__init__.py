from mhash.validation.base import HashValidator
from mhash.validation.base import IdentityValidator
from mhash.validation.base import ShakeValidator
from mhash.validation.base import Validator
from mhash.validation.base import prefix_matches
from mhash.validation.registry import ValidationRegistry

__all__ = [
    "HashValidator",
    "IdentityValidator",
    "ShakeValidator",
    "ValidationRegistry",
    "Validator",
    "prefix_matches",
]
