"""
Serial transport layer.

Provides blocking, byte-exact serial I/O for the sensor link.
"""

import serial
import logging
from typing import Optional, Protocol

from .constants import BAUDRATE, DEFAULT_TIMEOUT
from .exceptions import TransportError

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Byte stream the client talks through."""

    def write_all(self, data: bytes) -> None:
        ...

    def read_exact(self, size: int) -> bytes:
        ...

    def close(self) -> None:
        ...


class SerialTransport:
    """Serial communication transport layer."""

    def __init__(
        self,
        port: str,
        baudrate: int = BAUDRATE,
        timeout: float = DEFAULT_TIMEOUT
    ):
        """
        Initialize serial transport.

        Args:
            port: Serial port name (e.g., '/dev/ttyUSB0' or 'COM3')
            baudrate: Baud rate (default: 9600)
            timeout: Read timeout in seconds (default: 2.0)
        """
        self.port = port
        self.baudrate = baudrate
        self.timeout = timeout
        self._serial: Optional[serial.Serial] = None

    def open(self) -> None:
        """Open serial port (8N1, no flow control)."""
        try:
            self._serial = serial.Serial(
                port=self.port,
                baudrate=self.baudrate,
                bytesize=serial.EIGHTBITS,
                parity=serial.PARITY_NONE,
                stopbits=serial.STOPBITS_ONE,
                xonxoff=False,
                rtscts=False,
                timeout=self.timeout
            )
            logger.info(f"Opened serial port {self.port} at {self.baudrate} bps")

        except (serial.SerialException, OSError) as e:
            raise TransportError(f"Failed to open {self.port}: {e}") from e

    def close(self) -> None:
        """Close serial port."""
        if self._serial:
            try:
                self._serial.close()
            except (serial.SerialException, OSError) as e:
                logger.warning(f"Error closing {self.port}: {e}")
            self._serial = None
            logger.info(f"Closed serial port {self.port}")

    def write_all(self, data: bytes) -> None:
        """
        Write all bytes to the serial port.

        Args:
            data: Bytes to send

        Raises:
            TransportError: If port is not open or the write fails
        """
        if not self.is_open:
            raise TransportError("Serial port not open")

        try:
            count = self._serial.write(data)
            self._serial.flush()
        except (serial.SerialException, OSError) as e:
            raise TransportError(f"Send failed: {e}") from e

        if count is not None and count != len(data):
            raise TransportError(f"Short write: {count} of {len(data)} bytes")
        logger.debug(f"TX ({len(data)} bytes): {data.hex(' ')}")

    def read_exact(self, size: int) -> bytes:
        """
        Read exactly size bytes, blocking up to the port timeout.

        Args:
            size: Number of bytes to read

        Returns:
            The bytes read

        Raises:
            TransportError: If port is not open, the read fails or times out
        """
        if not self.is_open:
            raise TransportError("Serial port not open")

        try:
            data = self._serial.read(size)
        except (serial.SerialException, OSError) as e:
            raise TransportError(f"Receive failed: {e}") from e

        if len(data) != size:
            raise TransportError(
                f"Read timed out after {self.timeout}s: got {len(data)} of {size} bytes"
            )
        logger.debug(f"RX ({len(data)} bytes): {data.hex(' ')}")
        return data

    @property
    def is_open(self) -> bool:
        """Check if port is open."""
        return self._serial is not None and self._serial.is_open

    def __enter__(self) -> 'SerialTransport':
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        status = "open" if self.is_open else "closed"
        return f"SerialTransport({self.port}, {self.baudrate}, {status})"
