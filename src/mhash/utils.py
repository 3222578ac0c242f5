"""Shared utility helpers for mhash."""

from __future__ import annotations

import reprlib
from collections.abc import Mapping
from typing import Any

from typing_extensions import TypeAlias

BytesLike: TypeAlias = "bytes | bytearray | memoryview"


def build_repr(class_name: str, *leading: str, kwargs: Mapping[str, Any] | None = None) -> str:
    """Build a concise repr string: ``ClassName(leading…, k=v, …)``."""
    parts = list(leading)
    if kwargs:
        parts.extend(f"{k}={reprlib.Repr().repr(v)}" for k, v in kwargs.items())
    return f"{class_name}({', '.join(parts)})"


def as_bytes(data: Any, what: str = "data") -> bytes:
    """Return ``data`` as immutable bytes, rejecting anything that is not bytes-like."""
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"{what} must be bytes-like, not {type(data).__name__}")
