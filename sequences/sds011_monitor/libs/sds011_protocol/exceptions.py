"""
Custom exceptions for SDS011 protocol.
"""

from .constants import MAX_WORK_PERIOD


class SDS011Error(Exception):
    """Base exception for SDS011 protocol errors."""
    pass


class TooLongWorkTime(SDS011Error, ValueError):
    """Requested work period exceeds the sensor limit."""

    def __init__(self, minutes: int):
        self.minutes = minutes
        super().__init__(
            f"Work period must be at most {MAX_WORK_PERIOD} minutes, got {minutes}"
        )


class FrameError(SDS011Error):
    """Reply frame could not be validated."""
    pass


class EmptyDataFrame(FrameError):
    """Reply frame carried no data bytes."""

    def __init__(self):
        super().__init__("Reply frame has an empty data region")


class BadChecksum(FrameError):
    """Reply checksum verification failed."""

    def __init__(self, expected: int, received: int):
        self.expected = expected
        self.received = received
        super().__init__(
            f"Checksum mismatch: expected 0x{expected:02X}, received 0x{received:02X}"
        )


class TransportError(SDS011Error):
    """Serial port open, write or read failure (including read timeout)."""

    def __init__(self, description: str):
        self.description = description
        super().__init__(description)
