"""
SDS011 Protocol - Python implementation of the Nova SDS011 serial protocol.

This package provides:
- Protocol constants
- Frame checksum calculation
- Command frame building and reply validation
- Serial transport layer
- High-level protocol client
- Measurement data structure
"""

from .constants import (
    HEAD, TAIL, CMD_ID, SENSOR_ID, MAX_WORK_PERIOD,
    Command, Direction, ReportMode
)
from .checksum import Checksum
from .exceptions import (
    SDS011Error, TooLongWorkTime, FrameError, EmptyDataFrame, BadChecksum,
    TransportError
)
from .frame import Frame, FrameBuilder, FrameParser, ReplyFrame
from .measurement import Message
from .transport import SerialTransport, Transport
from .client import SDS011Client

__version__ = "1.0.0"
__all__ = [
    # Constants
    "HEAD", "TAIL", "CMD_ID", "SENSOR_ID", "MAX_WORK_PERIOD",
    "Command", "Direction", "ReportMode",
    # Checksum
    "Checksum",
    # Exceptions
    "SDS011Error", "TooLongWorkTime", "FrameError", "EmptyDataFrame",
    "BadChecksum", "TransportError",
    # Frame
    "Frame", "FrameBuilder", "FrameParser", "ReplyFrame",
    # Measurement
    "Message",
    # Transport
    "SerialTransport", "Transport",
    # Client
    "SDS011Client",
]
