"""Generators compute the native-length digest of data for one variant."""

from __future__ import annotations

from abc import ABC
from abc import abstractmethod

from typing_extensions import override

from mhash.hashes import HashFunction
from mhash.utils import as_bytes


class Generator(ABC):
    """Produces full, untruncated digests."""

    @abstractmethod
    def digest(self, data: bytes) -> bytes:
        """Return the native-length digest of ``data``."""
        ...


class HashGenerator(Generator):
    """Generator backed by a ``hash(data) -> bytes`` provider."""

    def __init__(self, hash_fn: HashFunction) -> None:
        self.hash_fn = hash_fn

    @override
    def digest(self, data: bytes) -> bytes:
        return self.hash_fn(as_bytes(data))

    def __repr__(self) -> str:
        return f"HashGenerator({getattr(self.hash_fn, '__name__', self.hash_fn)!r})"


__all__ = ["Generator", "HashGenerator"]
