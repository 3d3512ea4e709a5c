# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Unsigned LEB128 (ULEB128) encoding/decoding.

Each byte carries 7 payload bits, least-significant group first. The high
bit (0x80) is set on every byte except the last. Values are Python ints and
have no width limit.
"""

from typing import Tuple

from .checks import check_offset, to_integer
from .cursor import ByteCursor, BytePipe
from .errors import InvalidInputError, TruncatedInputError


def encode_unsigned(value) -> bytes:
    """
    Encode a non-negative integer as ULEB128.

    Args:
        value: Non-negative number to encode; fractions are truncated

    Returns:
        ULEB128-encoded bytes

    Raises:
        InvalidInputError: If value is negative or not a finite number
    """
    value = to_integer(value)
    if value < 0:
        raise InvalidInputError("Cannot encode negative value as unsigned LEB128")
    if value == 0:
        return b"\x00"

    result = bytearray()
    while value > 0:
        group = value & 0x7F
        value >>= 7
        if value > 0:
            group |= 0x80
        result.append(group)
    return bytes(result)


def decode_unsigned(cursor: ByteCursor) -> int:
    """
    Decode a ULEB128 value from a cursor.

    Consumes bytes up to and including the first one with the continuation
    bit clear.

    Raises:
        TruncatedInputError: If the cursor runs out first
    """
    value = 0
    shift = 0

    while True:
        chunk = cursor.read(1)
        if not chunk:
            raise TruncatedInputError("ULEB128 decode: unexpected end of data")

        byte = chunk[0]
        value |= (byte & 0x7F) << shift

        if not (byte & 0x80):
            return value

        shift += 7


def write_unsigned(cursor: ByteCursor, value) -> int:
    """Append the ULEB128 encoding of value to cursor, returning its length."""
    encoded = encode_unsigned(value)
    cursor.write(encoded)
    return len(encoded)


def decode_unsigned_at(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Decode a ULEB128 value from bytes.

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
    value = decode_unsigned(pipe)
    return value, offset + pipe.position
