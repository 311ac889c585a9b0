"""Shared fixtures: a recording stand-in for the serial transport."""

import pytest

from sequences.sds011_monitor.libs.sds011_protocol import TransportError


def make_reply(payload, cmd=0xC5, checksum=None) -> bytes:
    """Build a 10-byte reply frame around six data bytes."""
    payload = bytes(payload)
    if checksum is None:
        checksum = sum(payload) & 0xFF
    return bytes([0xAA, cmd]) + payload + bytes([checksum, 0xAB])


# Sensor acknowledgement of the passive report mode command
MODE_ACK = make_reply([0x02, 0x01, 0x01, 0x00, 0xA1, 0x60])


class FakeTransport:
    """Records writes and serves queued replies."""

    def __init__(self, replies=()):
        self.replies = list(replies)
        self.writes = []
        self.closed = False

    def write_all(self, data: bytes) -> None:
        self.writes.append(bytes(data))

    def read_exact(self, size: int) -> bytes:
        if not self.replies:
            raise TransportError(f"Read timed out: got 0 of {size} bytes")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def transport():
    return FakeTransport([MODE_ACK])
