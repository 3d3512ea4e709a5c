# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Byte cursors consumed and produced by the LEB128 codecs.

A cursor is a sequential, position-tracking view over a byte buffer. The
codecs only need three operations from it, described by ByteCursor.
"""

from typing import Protocol

from .errors import TruncatedInputError


class ByteCursor(Protocol):
    """Capabilities the codecs require from a cursor."""

    def read(self, size: int) -> bytes:
        """Consume exactly size bytes, raising TruncatedInputError if short."""
        ...

    def peek(self, size: int) -> bytes:
        """Return up to size upcoming bytes without consuming them."""
        ...

    def write(self, data: bytes) -> None:
        """Append bytes."""
        ...


class BytePipe:
    """
    In-memory cursor over a growable buffer.

    Reads consume from the front, writes append to the back:
        pipe = BytePipe(b"\\x80\\x01")
        pipe.write(b"\\x7f")
        pipe.read(2)  # b"\\x80\\x01"
        pipe.buffer   # b"\\x7f"
    """

    def __init__(self, data: bytes = b""):
        """
        Create a pipe.

        Args:
            data: Initial unread contents
        """
        self._data = bytearray(data)
        self._offset = 0

    def __len__(self) -> int:
        return len(self._data) - self._offset

    def __repr__(self) -> str:
        return f"BytePipe(position={self._offset}, remaining={len(self)})"

    @property
    def position(self) -> int:
        """Number of bytes consumed so far."""
        return self._offset

    @property
    def buffer(self) -> bytes:
        """Unread bytes, without consuming them."""
        return bytes(self._data[self._offset:])

    def getvalue(self) -> bytes:
        """Return every byte the pipe holds, consumed or not."""
        return bytes(self._data)

    def read(self, size: int) -> bytes:
        """
        Consume the next size bytes.

        Raises:
            TruncatedInputError: If fewer than size bytes remain
        """
        if size < 0:
            raise ValueError("Read size must be non-negative")
        end = self._offset + size
        if end > len(self._data):
            raise TruncatedInputError(
                f"BytePipe read: wanted {size} bytes, {len(self)} remaining"
            )
        data = bytes(self._data[self._offset:end])
        self._offset = end
        return data

    def peek(self, size: int) -> bytes:
        """Return up to size upcoming bytes without consuming them."""
        return bytes(self._data[self._offset:self._offset + size])

    def write(self, data: bytes) -> None:
        """Append bytes to the end of the pipe."""
        self._data.extend(data)
