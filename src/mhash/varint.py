"""
Unsigned LEB128 varints as used by the multihash code and length fields.

Each byte carries 7 payload bits, least significant group first, with the high bit set on every
byte except the last. Encodings are at most 9 bytes long (63 payload bits) and must be minimal:
a trailing ``0x00`` group after the first byte is rejected.

Examples:
    >>> encode_varint(0x0401)
    b'\\x81\\x08'
    >>> decode_varint(b"\\x81\\x08\\x04")
    (1025, 2)
"""

from __future__ import annotations

from typing import BinaryIO

from mhash.exceptions import NonCanonicalVarintError
from mhash.exceptions import TruncatedInputError
from mhash.exceptions import VarintOverflowError

MAX_VARINT_BYTES = 9
MAX_VARINT_VALUE = 2**63 - 1


def encode_varint(value: int) -> bytes:
    """
    Encode a non-negative integer as a minimal varint.

    Raises:
        ValueError: If value is negative.
        VarintOverflowError: If value does not fit in 63 bits.
    """
    if value < 0:
        raise ValueError(f"varint must be non-negative, got {value}")
    if value > MAX_VARINT_VALUE:
        raise VarintOverflowError(f"varint value {value:#x} exceeds {MAX_VARINT_VALUE:#x}")

    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def varint_len(value: int) -> int:
    """Number of bytes ``encode_varint(value)`` produces."""
    if value < 0:
        raise ValueError(f"varint must be non-negative, got {value}")
    return max(1, (value.bit_length() + 6) // 7)


def decode_varint(buffer: bytes | bytearray | memoryview, offset: int = 0) -> tuple[int, int]:
    """
    Decode one varint from ``buffer`` starting at ``offset``.

    Returns:
        ``(value, new_offset)`` where new_offset points just past the varint.

    Raises:
        TruncatedInputError: If the buffer ends before the final byte.
        VarintOverflowError: If the varint runs past the 9 byte limit.
        NonCanonicalVarintError: If the encoding is not minimal.
    """
    value = 0
    for index in range(MAX_VARINT_BYTES):
        position = offset + index
        if position >= len(buffer):
            raise TruncatedInputError(f"varint truncated after {index} byte(s)")
        byte = buffer[position]
        value |= (byte & 0x7F) << (7 * index)
        if not byte & 0x80:
            _check_minimal(byte, index)
            return value, position + 1
    raise VarintOverflowError(f"varint longer than {MAX_VARINT_BYTES} bytes")


def read_varint(stream: BinaryIO) -> int:
    """
    Read one varint from a binary stream, one byte at a time.

    Never reads beyond the varint's final byte.
    """
    value = 0
    for index in range(MAX_VARINT_BYTES):
        chunk = stream.read(1)
        if not chunk:
            raise TruncatedInputError(f"varint truncated after {index} byte(s)")
        byte = chunk[0]
        value |= (byte & 0x7F) << (7 * index)
        if not byte & 0x80:
            _check_minimal(byte, index)
            return value
    raise VarintOverflowError(f"varint longer than {MAX_VARINT_BYTES} bytes")


def _check_minimal(last_byte: int, index: int) -> None:
    if last_byte == 0 and index > 0:
        raise NonCanonicalVarintError(f"varint has {index} redundant continuation byte(s)")


__all__ = [
    "MAX_VARINT_BYTES",
    "MAX_VARINT_VALUE",
    "decode_varint",
    "encode_varint",
    "read_varint",
    "varint_len",
]
