"""
Frame checksum.

Both directions use the low 8 bits of the plain byte sum:
- command frames: sum of bytes 2..16 (opcode, data, ID bytes)
- reply frames: sum of bytes 2..7 (data)
"""

from typing import Iterable


class Checksum:
    """8-bit additive checksum."""

    @staticmethod
    def calculate(data: Iterable[int]) -> int:
        """
        Calculate checksum over data.

        Args:
            data: Bytes (or byte values) to sum

        Returns:
            Sum of all bytes truncated to 8 bits
        """
        return sum(data) & 0xFF

