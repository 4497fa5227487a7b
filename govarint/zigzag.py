# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Zigzag mapping between signed and unsigned 64-bit integers.

Small magnitudes stay small in both directions:
0 -> 0, -1 -> 1, 1 -> 2, -2 -> 3, ...
"""

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT64_MAX = (1 << 64) - 1


def zigzag_encode(value: int) -> int:
    """
    Map a signed 64-bit integer onto the unsigned 64-bit range.

    Args:
        value: Integer in [-2^63, 2^63-1]

    Returns:
        Zigzag-encoded unsigned integer
    """
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError("value must fit in a signed 64-bit integer")
    return (value << 1) ^ (value >> 63)


def zigzag_decode(value: int) -> int:
    """
    Inverse of zigzag_encode.

    Args:
        value: Integer in [0, 2^64-1]

    Returns:
        Signed integer
    """
    if not 0 <= value <= UINT64_MAX:
        raise ValueError("value must fit in an unsigned 64-bit integer")
    return (value >> 1) ^ -(value & 1)
