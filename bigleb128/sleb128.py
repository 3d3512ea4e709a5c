# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Signed LEB128 (SLEB128) encoding/decoding.

Uses the same 7-bit groups as ULEB128. Bit 0x40 of the final group is the
sign: clear for non-negative values, set for negative ones. Negative values
are stored as the bitwise complement of abs(value) - 1, so -1 is 0x7F.
"""

from typing import Tuple

from .checks import check_offset, to_integer
from .cursor import ByteCursor, BytePipe
from .errors import TruncatedInputError
from .uleb128 import decode_unsigned, encode_unsigned


def encode_signed(value) -> bytes:
    """
    Encode an integer as SLEB128.

    Args:
        value: Number to encode; fractions are truncated toward zero

    Returns:
        Canonical SLEB128-encoded bytes

    Raises:
        InvalidInputError: If value is not a finite number
    """
    value = to_integer(value)

    if value >= 0:
        encoded = encode_unsigned(value)
        if encoded[-1] & 0x40:
            # Final group would read back as negative
            return encoded[:-1] + bytes([encoded[-1] | 0x80, 0x00])
        return encoded

    magnitude = -value - 1
    if magnitude == 0:
        return b"\x7f"

    result = bytearray()
    while True:
        group = 0x7F - (magnitude & 0x7F)
        magnitude >>= 7
        if magnitude == 0 and group & 0x40:
            result.append(group)
            return bytes(result)
        result.append(group | 0x80)


def _scan(cursor: ByteCursor) -> bytes:
    """
    Return the bytes of the next encoded value without consuming them.

    Raises:
        TruncatedInputError: If no terminating byte is available
    """
    # One byte at a time, so a cursor over a live link never waits for
    # bytes past the terminator
    window = b""
    while True:
        size = len(window) + 1
        window = cursor.peek(size)
        if len(window) < size:
            raise TruncatedInputError("SLEB128 decode: unexpected end of data")
        if not (window[-1] & 0x80):
            return window


def decode_signed(cursor: ByteCursor) -> int:
    """
    Decode a SLEB128 value from a cursor.

    Consumes bytes up to and including the first one with the continuation
    bit clear. Nothing is consumed if the value is truncated.

    Raises:
        TruncatedInputError: If the cursor runs out first
    """
    encoded = _scan(cursor)
    if not (encoded[-1] & 0x40):
        return decode_unsigned(cursor)

    data = cursor.read(len(encoded))
    magnitude = 0
    for byte in reversed(data):
        magnitude = (magnitude << 7) | (0x7F - (byte & 0x7F))
    return -magnitude - 1


def write_signed(cursor: ByteCursor, value) -> int:
    """Append the SLEB128 encoding of value to cursor, returning its length."""
    encoded = encode_signed(value)
    cursor.write(encoded)
    return len(encoded)


def decode_signed_at(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Decode a SLEB128 value from bytes.

    Args:
        data: Bytes containing the value
        offset: Starting offset in data, must be non-negative

    Returns:
        Tuple of (decoded value, new offset after the value)

    Raises:
        ValueError: If offset is negative
    """
    check_offset(offset)
    pipe = BytePipe(data[offset:])
    value = decode_signed(pipe)
    return value, offset + pipe.position
