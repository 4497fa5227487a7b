# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
LEB128 encoding/decoding.

Unsigned LEB128 is the same byte format as the unsigned varint. Signed
LEB128 stores the two's-complement value and sign-extends from bit 6 of
the last byte, instead of zigzag-mapping it.
"""

from typing import Tuple

from .errors import TruncatedVarintError, VarintOverflowError
from .stream import ByteSink, ByteSource, BytesSource
from .varint import (
    CONTINUATION_BIT,
    MAX_VARINT_LEN64,
    encode_uvarint,
    read_uvarint,
    write_bytes,
)
from .zigzag import INT64_MAX, INT64_MIN

_SIGN_BIT = 0x40


def encode_leb128_u64(value: int) -> bytes:
    """Encode an unsigned 64-bit integer as unsigned LEB128."""
    return encode_uvarint(value)


def encode_leb128_i64(value: int) -> bytes:
    """
    Encode a signed 64-bit integer as signed LEB128.

    Args:
        value: Integer in [-2^63, 2^63-1]

    Returns:
        LEB128-encoded bytes
    """
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError("value must fit in a signed 64-bit integer")

    result = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if (value == 0 and not byte & _SIGN_BIT) or (value == -1 and byte & _SIGN_BIT):
            result.append(byte)
            return bytes(result)
        result.append(byte | CONTINUATION_BIT)


def write_leb128_u64(sink: ByteSink, value: int) -> int:
    """Write an unsigned LEB128 value to a sink and return the byte count."""
    return write_bytes(sink, encode_leb128_u64(value))


def write_leb128_i64(sink: ByteSink, value: int) -> int:
    """Write a signed LEB128 value to a sink and return the byte count."""
    return write_bytes(sink, encode_leb128_i64(value))


def read_leb128_u64(source: ByteSource) -> Tuple[int, int]:
    """
    Read an unsigned LEB128 value.

    Returns:
        Tuple of (decoded value, number of bytes consumed)
    """
    return read_uvarint(source)


def read_leb128_i64(source: ByteSource) -> Tuple[int, int]:
    """
    Read a signed LEB128 value.

    The 10th byte must end the value and may only hold the sign
    extension of bit 63 (0x00 or 0x7F).

    Returns:
        Tuple of (decoded value, number of bytes consumed)

    Raises:
        TruncatedVarintError: If the source ends before the last byte
        VarintOverflowError: If the value does not fit in 64 bits
    """
    value = 0
    shift = 0

    for i in range(MAX_VARINT_LEN64):
        byte = source.read_byte()
        if byte is None:
            raise TruncatedVarintError("LEB128 decode: unexpected end of data", i)

        if i == MAX_VARINT_LEN64 - 1 and byte not in (0x00, 0x7F):
            raise VarintOverflowError("LEB128 decode: value too large", i + 1)

        value |= (byte & 0x7F) << shift
        shift += 7

        if not byte & CONTINUATION_BIT:
            if byte & _SIGN_BIT:
                value -= 1 << shift
            return value, i + 1

    # Unreachable: the 10th byte either terminates or raises above
    raise VarintOverflowError("LEB128 decode: value too large", MAX_VARINT_LEN64)


def decode_leb128_u64(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """Decode unsigned LEB128 from bytes, returning (value, new offset)."""
    value, count = read_leb128_u64(BytesSource(data, offset))
    return value, offset + count


def decode_leb128_i64(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """Decode signed LEB128 from bytes, returning (value, new offset)."""
    value, count = read_leb128_i64(BytesSource(data, offset))
    return value, offset + count
