"""
Measurement data structures.

Query reply data layout (little-endian):
    DATA1 DATA2  PM2.5 x10, uint16
    DATA3 DATA4  PM10 x10, uint16
    DATA5 DATA6  Device ID
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional
import struct
import time

from .frame import ReplyFrame


@dataclass
class Message:
    """Single PM2.5 / PM10 reading."""
    timestamp: str     # UNIX seconds at decode time
    pm25: float        # ug/m3
    pm10: float        # ug/m3

    @classmethod
    def from_reply(cls, reply: ReplyFrame, timestamp: Optional[str] = None) -> 'Message':
        """
        Decode a validated query reply.

        Args:
            reply: Reply frame returned for a QUERY command
            timestamp: Override for the capture time (defaults to now)

        Returns:
            Message with concentrations in ug/m3
        """
        pm25_raw, pm10_raw = struct.unpack('<HH', reply.payload[:4])
        if timestamp is None:
            timestamp = str(int(time.time()))
        return cls(timestamp, pm25_raw / 10.0, pm10_raw / 10.0)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Message':
        return cls(str(data["timestamp"]), float(data["pm25"]), float(data["pm10"]))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_csv(self) -> str:
        """Format as 'timestamp, pm25, pm10'."""
        return f"{self.timestamp}, {self.pm25}, {self.pm10}"

    def __str__(self) -> str:
        return f"[{self.timestamp}] PM10={self.pm10} PM25={self.pm25}"
