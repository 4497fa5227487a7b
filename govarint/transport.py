# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Serial port byte sink/source.

Lets the codecs write and read varints directly over a serial line.
A read timeout is treated as end of data.
"""

import time
from typing import Optional, Tuple

import serial

from .varint import read_uvarint, read_varint, write_uvarint, write_varint

DEFAULT_BAUDRATE = 115200
DEFAULT_TIMEOUT = 1.0


class SerialPort:
    """
    Serial port usable as both a ByteSink and a ByteSource.

    Can be used as a context manager:
        with SerialPort("/dev/ttyACM0") as port:
            port.write_uvarint(300)
    """

    def __init__(
        self,
        port: str,
        baudrate: int = DEFAULT_BAUDRATE,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Open the serial port.

        Args:
            port: Serial port path or pyserial URL (e.g., "/dev/ttyACM0",
                "loop://", "socket://host:port")
            baudrate: Baud rate (default 115200)
            timeout: Read timeout in seconds (default 1.0)
        """
        self._ser = serial.serial_for_url(port, baudrate, timeout=timeout)
        time.sleep(0.1)  # Let the device settle

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self):
        """Close the serial connection."""
        if self._ser and self._ser.is_open:
            self._ser.close()

    @property
    def port(self) -> str:
        """Return the serial port name."""
        return self._ser.port

    def write_byte(self, byte: int) -> None:
        self._ser.write(bytes([byte]))

    def read_byte(self) -> Optional[int]:
        data = self._ser.read(1)
        if not data:
            return None
        return data[0]

    def flush(self) -> None:
        self._ser.flush()

    def write_uvarint(self, value: int) -> int:
        """Send an unsigned varint and return the number of bytes written."""
        count = write_uvarint(self, value)
        self.flush()
        return count

    def write_varint(self, value: int) -> int:
        """Send a signed varint and return the number of bytes written."""
        count = write_varint(self, value)
        self.flush()
        return count

    def read_uvarint(self) -> Tuple[int, int]:
        """Receive an unsigned varint as (value, bytes consumed)."""
        return read_uvarint(self)

    def read_varint(self) -> Tuple[int, int]:
        """Receive a signed varint as (value, bytes consumed)."""
        return read_varint(self)
