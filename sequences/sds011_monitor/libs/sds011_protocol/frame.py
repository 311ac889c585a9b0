"""
Frame parsing and building.

Command Frame (19 bytes): [HEAD][CMD_ID][CMD][DATA...][ID1][ID2][CS][TAIL]
- HEAD: 0xAA
- CMD_ID: 0xB4
- CMD: Command opcode
- DATA: Command parameters, zero padded so CMD + DATA is 13 bytes
- ID1, ID2: 0xFF 0xFF
- CS: Checksum of CMD + DATA + ID1 + ID2
- TAIL: 0xAB

Reply Frame (10 bytes): [HEAD][CMD][DATA1..DATA6][CS][TAIL]
- CS: Checksum of DATA1..DATA6
"""

from dataclasses import dataclass, field

from .checksum import Checksum
from .constants import (
    HEAD, TAIL, CMD_ID, SENSOR_ID,
    COMMAND_DATA_LEN, REPLY_FRAME_LEN, MAX_WORK_PERIOD,
    Command, Direction, ReportMode,
)
from .exceptions import TooLongWorkTime, EmptyDataFrame, BadChecksum, FrameError


@dataclass
class Frame:
    """Outbound command structure."""
    cmd: int
    params: bytes = field(default_factory=bytes)

    def __post_init__(self):
        if isinstance(self.params, (list, tuple)):
            self.params = bytes(self.params)
        if len(self.params) > COMMAND_DATA_LEN - 1:
            raise ValueError(
                f"Parameters exceed maximum size ({COMMAND_DATA_LEN - 1})"
            )

    @property
    def data(self) -> bytes:
        """Opcode and parameters padded with zeros to the fixed data length."""
        body = bytes([self.cmd]) + self.params
        return body + bytes(COMMAND_DATA_LEN - len(body))


class FrameBuilder:
    """Builds frames for transmission."""

    @staticmethod
    def build(frame: Frame) -> bytes:
        """
        Build complete frame with checksum.

        Args:
            frame: Frame object with cmd and params

        Returns:
            Complete 19-byte frame ready for transmission
        """
        # Checksum covers: CMD + DATA + ID1 + ID2
        body = frame.data + bytes([SENSOR_ID, SENSOR_ID])
        checksum = Checksum.calculate(body)

        return bytes([HEAD, CMD_ID]) + body + bytes([checksum, TAIL])

    @staticmethod
    def build_set_report_mode(mode: int = ReportMode.PASSIVE) -> bytes:
        """Build REPORT_MODE write command frame."""
        return FrameBuilder.build(
            Frame(Command.REPORT_MODE, bytes([Direction.WRITE, mode]))
        )

    @staticmethod
    def build_query() -> bytes:
        """Build QUERY command frame."""
        return FrameBuilder.build(Frame(Command.QUERY))

    @staticmethod
    def build_set_work_period(minutes: int) -> bytes:
        """
        Build WORK_PERIOD write command frame.

        Args:
            minutes: Work period 0-30 (0 = continuous)

        Raises:
            TooLongWorkTime: If minutes exceeds 30
            ValueError: If minutes is negative
        """
        if minutes > MAX_WORK_PERIOD:
            raise TooLongWorkTime(minutes)
        if minutes < 0:
            raise ValueError(f"Work period must not be negative, got {minutes}")
        return FrameBuilder.build(
            Frame(Command.WORK_PERIOD, bytes([Direction.WRITE, minutes]))
        )


@dataclass
class ReplyFrame:
    """Validated inbound reply."""
    raw: bytes

    @property
    def head(self) -> int:
        return self.raw[0]

    @property
    def cmd(self) -> int:
        return self.raw[1]

    @property
    def payload(self) -> bytes:
        """The six data bytes (indices 2-7)."""
        return self.raw[2:8]

    @property
    def checksum(self) -> int:
        return self.raw[8]

    @property
    def tail(self) -> int:
        return self.raw[9]

    def __repr__(self) -> str:
        return f"ReplyFrame(cmd=0x{self.cmd:02X}, payload={self.payload.hex(' ')})"


class FrameParser:
    """Validates reply frames read from the sensor."""

    @staticmethod
    def parse(data: bytes) -> ReplyFrame:
        """
        Validate a reply frame.

        Only the data checksum is verified; the reply type is implied by
        the command that was sent.

        Args:
            data: Exactly 10 bytes read from the sensor

        Returns:
            ReplyFrame wrapping the raw bytes

        Raises:
            FrameError: If data is not a 10-byte frame
            EmptyDataFrame: If the data region is empty
            BadChecksum: If the checksum byte does not match
        """
        data = bytes(data)
        payload = data[2:8]
        if not payload:
            raise EmptyDataFrame()

        if len(data) != REPLY_FRAME_LEN:
            raise FrameError(
                f"Reply frame must be {REPLY_FRAME_LEN} bytes, got {len(data)}"
            )

        calc = Checksum.calculate(payload)
        if calc != data[8]:
            raise BadChecksum(expected=calc, received=data[8])

        return ReplyFrame(data)
