from mhash.generation.base import Generator
from mhash.generation.base import HashGenerator
from mhash.generation.registry import DEFAULT_VARIANT
from mhash.generation.registry import GenerationRegistry

__all__ = [
    "DEFAULT_VARIANT",
    "GenerationRegistry",
    "Generator",
    "HashGenerator",
]
