# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Varint encoding/decoding (Go encoding/binary compatible).

Unsigned values use 7 data bits per byte, least-significant group first,
with the high bit set on every byte except the last. Signed values are
zigzag-mapped onto the unsigned range first, so small negative numbers
stay short.
"""

from typing import Iterable, Tuple

from .errors import SinkWriteError, TruncatedVarintError, VarintOverflowError
from .stream import ByteSink, ByteSource, BytesSource
from .zigzag import UINT64_MAX, zigzag_decode, zigzag_encode

# Maximum length of a varint-encoded N-bit integer
MAX_VARINT_LEN16 = 3
MAX_VARINT_LEN32 = 5
MAX_VARINT_LEN64 = 10

CONTINUATION_BIT = 0x80


def _check_uint64(value: int) -> None:
    if value < 0:
        raise ValueError("Cannot encode negative value as uvarint")
    if value > UINT64_MAX:
        raise ValueError("Cannot encode value larger than 2^64-1 as uvarint")


def write_bytes(sink: ByteSink, data: Iterable[int]) -> int:
    """
    Write bytes to a sink one at a time.

    Returns:
        Number of bytes written

    Raises:
        SinkWriteError: If the sink raised OSError
    """
    written = 0
    for byte in data:
        try:
            sink.write_byte(byte)
        except OSError as e:
            raise SinkWriteError(
                f"Varint encode: sink write failed after {written} bytes: {e}",
                written,
            ) from e
        written += 1
    return written


def encode_uvarint(value: int) -> bytes:
    """
    Encode an unsigned 64-bit integer as a varint.

    Args:
        value: Integer in [0, 2^64-1]

    Returns:
        Varint-encoded bytes
    """
    _check_uint64(value)

    result = bytearray()
    while value >= CONTINUATION_BIT:
        result.append((value & 0x7F) | CONTINUATION_BIT)
        value >>= 7
    result.append(value)
    return bytes(result)


def append_uvarint(buf: bytearray, value: int) -> int:
    """Append the varint encoding of value to buf and return its length."""
    encoded = encode_uvarint(value)
    buf.extend(encoded)
    return len(encoded)


def uvarint_size(value: int) -> int:
    """Number of bytes encode_uvarint(value) produces."""
    _check_uint64(value)
    return max(1, (value.bit_length() + 6) // 7)


def write_uvarint(sink: ByteSink, value: int) -> int:
    """
    Encode an unsigned 64-bit integer into a byte sink.

    Args:
        sink: Destination for the encoded bytes
        value: Integer in [0, 2^64-1]

    Returns:
        Number of bytes written

    Raises:
        ValueError: If value is out of range
        SinkWriteError: If the sink rejected a write
    """
    return write_bytes(sink, encode_uvarint(value))


def read_uvarint(source: ByteSource) -> Tuple[int, int]:
    """
    Decode an unsigned varint from a byte source.

    Reads exactly as many bytes as the varint occupies, and never more
    than MAX_VARINT_LEN64.

    Args:
        source: Where to read bytes from

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
            raise TruncatedVarintError("Varint decode: unexpected end of data", i)

        if byte < CONTINUATION_BIT:
            # The 10th byte may only carry bit 63
            if i == MAX_VARINT_LEN64 - 1 and byte > 1:
                raise VarintOverflowError("Varint decode: value too large", i + 1)
            return value | (byte << shift), i + 1

        value |= (byte & 0x7F) << shift
        shift += 7

    raise VarintOverflowError("Varint decode: value too large", MAX_VARINT_LEN64)


def decode_uvarint(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Decode an unsigned varint from bytes.

    Args:
        data: Bytes containing the varint
        offset: Starting offset in data

    Returns:
        Tuple of (decoded value, new offset after varint)

    Raises:
        TruncatedVarintError: If data ends before the last byte
        VarintOverflowError: If the value does not fit in 64 bits
    """
    value, count = read_uvarint(BytesSource(data, offset))
    return value, offset + count


def encode_varint(value: int) -> bytes:
    """Encode a signed 64-bit integer as a zigzag varint."""
    return encode_uvarint(zigzag_encode(value))


def append_varint(buf: bytearray, value: int) -> int:
    """Append the signed varint encoding of value to buf and return its length."""
    return append_uvarint(buf, zigzag_encode(value))


def varint_size(value: int) -> int:
    """Number of bytes encode_varint(value) produces."""
    return uvarint_size(zigzag_encode(value))


def write_varint(sink: ByteSink, value: int) -> int:
    """
    Encode a signed 64-bit integer into a byte sink.

    Returns:
        Number of bytes written
    """
    return write_uvarint(sink, zigzag_encode(value))


def read_varint(source: ByteSource) -> Tuple[int, int]:
    """
    Decode a signed varint from a byte source.

    Returns:
        Tuple of (decoded value, number of bytes consumed)
    """
    value, count = read_uvarint(source)
    return zigzag_decode(value), count


def decode_varint(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Decode a signed varint from bytes.

    Returns:
        Tuple of (decoded value, new offset after varint)
    """
    value, new_offset = decode_uvarint(data, offset)
    return zigzag_decode(value), new_offset
