# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
bigleb128 - LEB128 codec for arbitrary-precision integers.

This package encodes and decodes unsigned (ULEB128) and signed (SLEB128)
LEB128 values of any magnitude, reading from and writing to byte cursors.

Example usage:
    from bigleb128 import BytePipe, encode_signed, decode_signed

    pipe = BytePipe(encode_signed(-65) + encode_signed(2 ** 100))
    assert decode_signed(pipe) == -65
    assert decode_signed(pipe) == 2 ** 100

    # Straight off a device link
    with SerialCursor("/dev/ttyACM0") as cursor:
        length = decode_unsigned(cursor)
"""

from .cursor import ByteCursor, BytePipe
from .errors import LEB128Error, InvalidInputError, TruncatedInputError
from .serial_cursor import SerialCursor
from .sleb128 import decode_signed, decode_signed_at, encode_signed, write_signed
from .uleb128 import (
    decode_unsigned,
    decode_unsigned_at,
    encode_unsigned,
    write_unsigned,
)

__version__ = "0.1.0"

__all__ = [
    # Cursors
    "ByteCursor",
    "BytePipe",
    "SerialCursor",
    # Errors
    "LEB128Error",
    "InvalidInputError",
    "TruncatedInputError",
    # Unsigned
    "encode_unsigned",
    "decode_unsigned",
    "write_unsigned",
    "decode_unsigned_at",
    # Signed
    "encode_signed",
    "decode_signed",
    "write_signed",
    "decode_signed_at",
]
