"""
Protocol constants for the Nova SDS011 laser dust sensor.

Reference: Laser Dust Sensor Control Protocol V1.3
"""

from enum import IntEnum

# Frame delimiters
HEAD = 0xAA
TAIL = 0xAB

# Command ID byte of every host -> sensor frame
CMD_ID = 0xB4

# Device ID bytes (0xFF 0xFF addresses any sensor on the line)
SENSOR_ID = 0xFF

# Frame sizes
COMMAND_FRAME_LEN = 19
REPLY_FRAME_LEN = 10

# Opcode + parameters + zero padding, before the two ID bytes
COMMAND_DATA_LEN = 13

# Longest duty cycle the sensor accepts, in minutes (0 = continuous)
MAX_WORK_PERIOD = 30

# Serial link defaults
DEFAULT_PORT = "/dev/ttyUSB0"
BAUDRATE = 9600
DEFAULT_TIMEOUT = 2.0


class Command(IntEnum):
    """Command opcodes (Host -> Sensor)."""
    REPORT_MODE = 0x02
    QUERY = 0x04
    WORK_PERIOD = 0x08


class Direction(IntEnum):
    """Read/write flag shared by the report mode and work period commands."""
    READ = 0x00
    WRITE = 0x01


class ReportMode(IntEnum):
    """Data reporting modes."""
    ACTIVE = 0x00       # Sensor pushes a reading every period
    PASSIVE = 0x01      # Sensor only answers queries

    @classmethod
    def name_of(cls, mode: int) -> str:
        """Get mode name from code."""
        names = {
            cls.ACTIVE: "ACTIVE",
            cls.PASSIVE: "PASSIVE",
        }
        return names.get(mode, f"Unknown(0x{mode:02X})")
