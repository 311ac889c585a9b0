"""
High-level protocol client.

Provides a simple API for polling an SDS011 sensor in passive (query) mode.
"""

import logging
from typing import Optional

from .constants import (
    DEFAULT_TIMEOUT, BAUDRATE, REPLY_FRAME_LEN, ReportMode
)
from .frame import FrameBuilder, FrameParser, ReplyFrame
from .measurement import Message
from .transport import SerialTransport, Transport

logger = logging.getLogger(__name__)


class SDS011Client:
    """
    High-level client for the SDS011 protocol.

    Construction switches the sensor to passive reporting, so the sensor
    only answers explicit queries for the lifetime of the client.

    Not thread-safe: each call is one write followed by one blocking read.

    Example:
        with SDS011Client.open("/dev/ttyUSB0") as sensor:
            sensor.set_work_period(5)
            print(sensor.query())
    """

    def __init__(self, transport: Transport):
        """
        Initialize SDS011 client.

        Args:
            transport: Open transport; the client takes ownership of it

        Raises:
            TransportError: If the report mode command cannot be exchanged
            FrameError: If the report mode reply is invalid
        """
        self.transport = transport
        self._set_report_mode()

    @classmethod
    def open(
        cls,
        port: str,
        timeout: float = DEFAULT_TIMEOUT
    ) -> 'SDS011Client':
        """
        Open a serial port and create a client on it.

        Args:
            port: Serial port name (e.g., '/dev/ttyUSB0')
            timeout: Read timeout in seconds

        Returns:
            Ready SDS011Client in passive mode
        """
        transport = SerialTransport(port, baudrate=BAUDRATE, timeout=timeout)
        transport.open()
        try:
            return cls(transport)
        except Exception:
            transport.close()
            raise

    def _set_report_mode(self) -> None:
        """Switch the sensor to passive (query-only) reporting."""
        mode = ReportMode.PASSIVE
        self._send_and_receive(FrameBuilder.build_set_report_mode(mode))
        logger.info(f"Report mode set to {ReportMode.name_of(mode)}")

    def _send_and_receive(self, frame_data: bytes) -> ReplyFrame:
        """
        Send frame and read the reply.

        Args:
            frame_data: Command frame bytes to send

        Returns:
            Validated ReplyFrame

        Raises:
            TransportError: If the write or read fails or times out
            EmptyDataFrame: If the reply has no data bytes
            BadChecksum: If the reply checksum does not match
        """
        logger.debug(f"Sending frame: {frame_data.hex()}")
        self.transport.write_all(frame_data)

        reply = FrameParser.parse(self.transport.read_exact(REPLY_FRAME_LEN))
        logger.debug(f"Received frame: cmd=0x{reply.cmd:02X}, "
                     f"payload={reply.payload.hex()}")
        return reply

    def set_work_period(self, minutes: int) -> None:
        """
        Set the sensor duty cycle.

        The sensor sleeps between samples when minutes > 0.

        Args:
            minutes: Work period 0-30 (0 = continuous)

        Raises:
            TooLongWorkTime: If minutes exceeds 30 (nothing is sent)
        """
        self._send_and_receive(FrameBuilder.build_set_work_period(minutes))
        logger.info(f"Work period set to {minutes} min")

    def query(self, timestamp: Optional[str] = None) -> Message:
        """
        Query one measurement.

        Args:
            timestamp: Override for the capture time (defaults to now)

        Returns:
            Message with PM2.5 and PM10 concentrations
        """
        reply = self._send_and_receive(FrameBuilder.build_query())
        message = Message.from_reply(reply, timestamp)
        logger.debug(f"Measurement: {message}")
        return message

    def close(self) -> None:
        """Close the underlying transport."""
        self.transport.close()

    def __enter__(self) -> 'SDS011Client':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
