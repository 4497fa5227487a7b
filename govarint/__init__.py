# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
govarint - Go-compatible variable-length integer encoding.

Encodes 64-bit unsigned integers 7 bits per byte (least-significant
group first, high bit set while more bytes follow) and signed integers
through a zigzag mapping, matching Go's encoding/binary varints.

Example usage:
    from govarint import BufferSink, BytesSource, write_varint, read_varint

    sink = BufferSink()
    write_varint(sink, -300)

    value, count = read_varint(BytesSource(sink.getvalue()))
    print(f"{value} ({count} bytes)")
"""

from .errors import (
    VarintError,
    DecodeError,
    TruncatedVarintError,
    VarintOverflowError,
    SinkWriteError,
)
from .stream import (
    ByteSink,
    ByteSource,
    BytesSource,
    BufferSink,
    StreamSource,
    StreamSink,
)
from .varint import (
    MAX_VARINT_LEN16,
    MAX_VARINT_LEN32,
    MAX_VARINT_LEN64,
    CONTINUATION_BIT,
    encode_uvarint,
    decode_uvarint,
    append_uvarint,
    uvarint_size,
    write_uvarint,
    read_uvarint,
    encode_varint,
    decode_varint,
    append_varint,
    varint_size,
    write_varint,
    read_varint,
)
from .zigzag import zigzag_encode, zigzag_decode
from .leb128 import (
    encode_leb128_u64,
    encode_leb128_i64,
    decode_leb128_u64,
    decode_leb128_i64,
    write_leb128_u64,
    write_leb128_i64,
    read_leb128_u64,
    read_leb128_i64,
)
from .transport import SerialPort

__version__ = "0.1.0"

__all__ = [
    # Errors
    "VarintError",
    "DecodeError",
    "TruncatedVarintError",
    "VarintOverflowError",
    "SinkWriteError",
    # Byte sinks and sources
    "ByteSink",
    "ByteSource",
    "BytesSource",
    "BufferSink",
    "StreamSource",
    "StreamSink",
    "SerialPort",
    # Constants
    "MAX_VARINT_LEN16",
    "MAX_VARINT_LEN32",
    "MAX_VARINT_LEN64",
    "CONTINUATION_BIT",
    # Unsigned varint
    "encode_uvarint",
    "decode_uvarint",
    "append_uvarint",
    "uvarint_size",
    "write_uvarint",
    "read_uvarint",
    # Signed varint
    "encode_varint",
    "decode_varint",
    "append_varint",
    "varint_size",
    "write_varint",
    "read_varint",
    # Zigzag
    "zigzag_encode",
    "zigzag_decode",
    # LEB128
    "encode_leb128_u64",
    "encode_leb128_i64",
    "decode_leb128_u64",
    "decode_leb128_i64",
    "write_leb128_u64",
    "write_leb128_i64",
    "read_leb128_u64",
    "read_leb128_i64",
]
