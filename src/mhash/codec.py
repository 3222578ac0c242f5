"""
Binary encoding of multihashes.

Wire layout::

    code:varint | length:varint | digest:length bytes

Three decoding modes are provided:

- ``decode`` parses one multihash from the front of a buffer and reports how many bytes it used,
  leaving anything after it to the caller.
- ``decode_strict`` requires the buffer to hold exactly one multihash; leftover or missing bytes are
  a ``TrailingOrMissingBytesError``.
- ``read_multihash`` pulls one multihash from a binary stream without reading past its last digest
  byte.

In every mode the code is checked against the variant table as soon as it is read and the length
is checked against the variant's maximum before any digest byte is consumed.

Examples:
    >>> mh, used = decode(bytes.fromhex("1104deadbeef") + b"rest")
    >>> mh.name, mh.digest.hex(), used
    ('sha1', 'deadbeef', 6)
    >>> encode(mh).hex()
    '1104deadbeef'
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import BinaryIO

from mhash import variants
from mhash.exceptions import LengthTooLongError
from mhash.exceptions import TrailingOrMissingBytesError
from mhash.exceptions import TruncatedInputError
from mhash.multihash import MultiHash
from mhash.utils import BytesLike
from mhash.utils import as_bytes
from mhash.variants import Variant
from mhash.varint import decode_varint
from mhash.varint import encode_varint
from mhash.varint import read_varint
from mhash.varint import varint_len

logger = logging.getLogger(__name__)


# region Encoding


def encode(multihash: MultiHash) -> bytes:
    """Encode a multihash with minimal varints for code and length."""
    return (
        encode_varint(multihash.code) + encode_varint(len(multihash.digest)) + multihash.digest
    )


def encoded_len(multihash: MultiHash) -> int:
    """Exact size of ``encode(multihash)``, for pre-sizing buffers."""
    length = len(multihash.digest)
    return varint_len(multihash.code) + varint_len(length) + length


def write_multihash(stream: BinaryIO, multihash: MultiHash) -> int:
    """
    Write the encoding of ``multihash`` to a binary stream.

    Short writes from raw streams are retried until every byte has been accepted. Errors from the
    stream propagate; if one is raised part of the multihash may already have been written.

    Returns:
        The number of bytes written.
    """
    data = encode(multihash)
    view = memoryview(data)
    while view:
        written = stream.write(view)
        if written is None:  # file-likes without a count write everything
            break
        if written == 0:
            raise OSError(f"stream accepted no bytes with {len(view)} of {len(data)} left")
        view = view[written:]
    return len(data)


# region Decoding

_READ_CHUNK = 64 * 1024  # upper bound on a single stream.read() while reading a digest


def _check_length(variant: Variant, length: int) -> None:
    if length > variant.max_len:
        raise LengthTooLongError(length, variant.max_len, variant.name)


def _decode_header(buffer: bytes, offset: int = 0) -> tuple[Variant, int, int]:
    """Parse and check the header at ``offset``, returning ``(variant, length, digest_offset)``."""
    code, offset = decode_varint(buffer, offset)
    variant = variants.from_code(code)
    length, offset = decode_varint(buffer, offset)
    _check_length(variant, length)
    return variant, length, offset


def _decode_at(data: bytes, start: int) -> tuple[MultiHash, int]:
    """Decode the multihash beginning at ``start``, returning it and the offset just past it."""
    variant, length, offset = _decode_header(data, start)
    end = offset + length
    if end > len(data):
        raise TruncatedInputError(
            f"{variant.name} digest declares {length} bytes, only {len(data) - offset} available"
        )
    return MultiHash(variant, data[offset:end]), end


def decode(buffer: BytesLike) -> tuple[MultiHash, int]:
    """
    Decode one multihash from the front of ``buffer``.

    Returns:
        ``(multihash, bytes_consumed)``.

    Raises:
        TruncatedInputError: If the buffer ends inside the code, the length or the digest.
        UnknownCodeError: If the code is not a known or application specific one.
        LengthTooLongError: If the declared length exceeds the variant's maximum.
        VarintError: If a varint is overlong or not minimally encoded.
    """
    return _decode_at(as_bytes(buffer, "buffer"), 0)


def decode_strict(buffer: BytesLike) -> MultiHash:
    """
    Decode a buffer that must hold exactly one multihash.

    Raises:
        TrailingOrMissingBytesError: If the bytes after the header are not exactly the declared
            digest length.
        TruncatedInputError: If the buffer ends inside the code or length varint.
        UnknownCodeError: If the code is not a known or application specific one.
        LengthTooLongError: If the declared length exceeds the variant's maximum.
        VarintError: If a varint is overlong or not minimally encoded.
    """
    data = as_bytes(buffer, "buffer")
    variant, length, offset = _decode_header(data)
    remaining = len(data) - offset
    if remaining != length:
        raise TrailingOrMissingBytesError(length, remaining)
    return MultiHash(variant, data[offset:])


def iter_multihashes(buffer: BytesLike) -> Iterator[MultiHash]:
    """Yield the multihashes packed back to back in ``buffer``."""
    data = as_bytes(buffer, "buffer")
    offset = 0
    while offset < len(data):
        multihash, offset = _decode_at(data, offset)
        yield multihash


def read_multihash(stream: BinaryIO) -> MultiHash:
    """
    Read one multihash from a binary stream.

    The code and length are read one byte at a time and exactly ``length`` digest bytes are read
    afterwards in bounded chunks, so the stream is left positioned just after the multihash and a
    forged length cannot force a large allocation.

    Raises:
        TruncatedInputError: If the stream ends before the multihash is complete.
        UnknownCodeError: If the code is not a known or application specific one.
        LengthTooLongError: If the declared length exceeds the variant's maximum.
        VarintError: If a varint is overlong or not minimally encoded.
    """
    variant = variants.from_code(read_varint(stream))
    length = read_varint(stream)
    _check_length(variant, length)

    chunks = []
    remaining = length
    while remaining:
        chunk = stream.read(min(remaining, _READ_CHUNK))
        if not chunk:
            raise TruncatedInputError(
                f"{variant.name} digest declares {length} bytes, stream ended after "
                f"{length - remaining}"
            )
        chunks.append(chunk)
        remaining -= len(chunk)
    logger.debug(f"Read {variant} multihash with {length} byte digest from stream")
    return MultiHash(variant, b"".join(chunks))


__all__ = [
    "decode",
    "decode_strict",
    "encode",
    "encoded_len",
    "iter_multihashes",
    "read_multihash",
    "write_multihash",
]
