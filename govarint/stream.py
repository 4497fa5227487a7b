# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Byte sink and byte source interfaces used by the codecs.

A sink accepts one byte at a time. A source yields one byte at a time and
returns None once it is exhausted, so "no more bytes" is never confused
with a zero byte.
"""

import errno
from typing import BinaryIO, Optional, Protocol


class ByteSink(Protocol):
    """Anything that can append single bytes."""

    def write_byte(self, byte: int) -> None:
        ...


class ByteSource(Protocol):
    """Anything that can yield single bytes, or None at end of data."""

    def read_byte(self) -> Optional[int]:
        ...


class BytesSource:
    """
    Read bytes from an in-memory buffer.

    Args:
        data: Buffer to read from
        offset: Starting offset in data
    """

    def __init__(self, data: bytes, offset: int = 0):
        if offset < 0:
            raise ValueError("offset must be non-negative")
        self._data = data
        self._offset = offset

    @property
    def offset(self) -> int:
        """Position of the next byte to read."""
        return self._offset

    def read_byte(self) -> Optional[int]:
        if self._offset >= len(self._data):
            return None
        byte = self._data[self._offset]
        self._offset += 1
        return byte


class BufferSink:
    """
    Append bytes to a bytearray.

    Args:
        buffer: Target buffer (a new one is created if omitted)
        capacity: Optional limit on the total size of the buffer
    """

    def __init__(self, buffer: Optional[bytearray] = None, capacity: Optional[int] = None):
        self.buffer = bytearray() if buffer is None else buffer
        self.capacity = capacity

    def write_byte(self, byte: int) -> None:
        if self.capacity is not None and len(self.buffer) >= self.capacity:
            raise OSError(errno.ENOSPC, "Buffer sink is full")
        self.buffer.append(byte)

    def getvalue(self) -> bytes:
        """Return the bytes written so far."""
        return bytes(self.buffer)


class StreamSource:
    """Read bytes from a binary file object."""

    def __init__(self, fileobj: BinaryIO):
        self._fileobj = fileobj

    def read_byte(self) -> Optional[int]:
        byte = self._fileobj.read(1)
        if not byte:
            return None
        return byte[0]


class StreamSink:
    """Write bytes to a binary file object."""

    def __init__(self, fileobj: BinaryIO):
        self._fileobj = fileobj

    def write_byte(self, byte: int) -> None:
        written = self._fileobj.write(bytes([byte]))
        # Non-blocking streams report a full buffer as None or 0
        if not written:
            raise OSError(errno.EAGAIN, "Short write to stream")
