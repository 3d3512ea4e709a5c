# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Serial port cursor.

Lets the codecs decode LEB128 values directly from a device link. Any URL
understood by pyserial works, including "loop://" for a local loopback.
"""

import logging

import serial

from .errors import TruncatedInputError

logger = logging.getLogger(__name__)

DEFAULT_BAUDRATE = 115200
DEFAULT_TIMEOUT = 1.0


class SerialCursor:
    """
    ByteCursor backed by a serial port.

    Can be used as a context manager:
        with SerialCursor("/dev/ttyACM0") as cursor:
            value = decode_unsigned(cursor)
    """

    def __init__(
        self,
        port: str,
        baudrate: int = DEFAULT_BAUDRATE,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Open the port.

        Args:
            port: Serial port path or pyserial URL (e.g., "/dev/ttyACM0")
            baudrate: Baud rate (default 115200)
            timeout: Read timeout in seconds (default 1.0)
        """
        self._ser = serial.serial_for_url(port, baudrate=baudrate, timeout=timeout)
        self._pending = bytearray()
        self._position = 0
        logger.debug("Opened %s at %d baud", port, baudrate)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self):
        """Close the serial connection."""
        if self._ser and self._ser.is_open:
            self._ser.close()
            logger.debug("Closed %s", self.port)

    @property
    def port(self) -> str:
        """Return the serial port name."""
        return self._ser.port

    @property
    def position(self) -> int:
        """Number of bytes consumed so far."""
        return self._position

    def _fill(self, size: int) -> None:
        """Read ahead until size bytes are pending or the port times out."""
        while len(self._pending) < size:
            chunk = self._ser.read(size - len(self._pending))
            if not chunk:
                logger.debug(
                    "Timeout on %s with %d of %d bytes pending",
                    self.port, len(self._pending), size,
                )
                return
            self._pending.extend(chunk)

    def peek(self, size: int) -> bytes:
        """Return up to size upcoming bytes without consuming them."""
        self._fill(size)
        return bytes(self._pending[:size])

    def read(self, size: int) -> bytes:
        """
        Consume the next size bytes.

        Raises:
            TruncatedInputError: If the port times out first
        """
        self._fill(size)
        if len(self._pending) < size:
            raise TruncatedInputError(
                f"Serial read: timeout after {len(self._pending)} of {size} bytes"
            )
        data = bytes(self._pending[:size])
        del self._pending[:size]
        self._position += size
        return data

    def write(self, data: bytes) -> None:
        """Send raw bytes."""
        self._ser.write(data)
        self._ser.flush()
        logger.debug("Wrote %d bytes to %s", len(data), self.port)
