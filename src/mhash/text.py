"""
Base58 text form of multihashes.

The text form is the Base58 (bitcoin alphabet) rendering of the complete binary encoding, as used
for display and for parsing user input.

Examples:
    >>> from mhash.multihash import MultiHash
    >>> text = to_base58(MultiHash.with_name("sha1", bytes.fromhex("deadbeef")))
    >>> from_base58(text).digest.hex()
    'deadbeef'
"""

from __future__ import annotations

import base58

from mhash.codec import decode_strict
from mhash.codec import encode
from mhash.exceptions import TextDecodeError
from mhash.multihash import MultiHash


def to_base58(multihash: MultiHash) -> str:
    """Render a multihash as Base58 text."""
    return base58.b58encode(encode(multihash)).decode("ascii")


def from_base58(text: str) -> MultiHash:
    """
    Parse Base58 text holding exactly one multihash.

    Raises:
        TextDecodeError: If ``text`` is not valid Base58.
        DecodeError: If the decoded bytes are not a well formed multihash.
        CreationError: If the code or length is rejected.
    """
    try:
        data = base58.b58decode(text.strip())
    except ValueError as e:
        raise TextDecodeError(f"invalid base58 multihash {text!r}: {e}") from e
    return decode_strict(data)


__all__ = ["from_base58", "to_base58"]
