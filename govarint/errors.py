# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Exceptions raised by the varint codecs.
"""


class VarintError(Exception):
    """Base exception for varint errors."""
    pass


class DecodeError(VarintError, ValueError):
    """Encoded input could not be decoded."""

    def __init__(self, message: str, consumed: int):
        super().__init__(message)
        self.consumed = consumed


class TruncatedVarintError(DecodeError):
    """Source ran out of bytes before a terminating byte was read."""
    pass


class VarintOverflowError(DecodeError):
    """Encoded value does not fit in 64 bits."""
    pass


class SinkWriteError(VarintError, OSError):
    """The byte sink rejected a write."""

    def __init__(self, message: str, written: int):
        super().__init__(message)
        self.written = written
