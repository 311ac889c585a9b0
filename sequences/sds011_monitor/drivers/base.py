"""
Dust Sensor Driver Module

Async contract the monitor sequence relies on: a passive-mode particulate
sensor that can be given a duty cycle and polled for PM2.5/PM10 readings.
Dry-run hardware supplied by the station must follow the same contract.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class DustSensorDriver(ABC):
    """
    Abstract particulate sensor driver.

    Subclasses open the link in ``_open`` / ``_close`` and implement the
    two sensor commands. The last work period that was applied is
    remembered so ``reset`` can restore it after reopening the link.

    Attributes:
        name: Driver identifier name
        config: Configuration dictionary (port, timeout)
    """

    def __init__(
        self,
        name: str,
        config: Optional[Dict[str, Any]] = None
    ):
        self.name = name
        self.config = config or {}
        self._connected = False
        self._work_period: Optional[int] = None

    @abstractmethod
    async def _open(self) -> None:
        """Open the link and put the sensor in passive mode."""
        ...

    @abstractmethod
    async def _close(self) -> None:
        """Release the link."""
        ...

    @abstractmethod
    async def _apply_work_period(self, minutes: int) -> None:
        ...

    @abstractmethod
    async def _read(self) -> Dict[str, Any]:
        """Return one reading as {"timestamp", "pm25", "pm10"}."""
        ...

    async def connect(self) -> bool:
        """
        Open the sensor link.

        Returns:
            bool: True if the sensor answered the mode command
        """
        try:
            await self._open()
        except Exception as e:
            logger.error(f"{self.name}: connect failed: {e}")
            await self.disconnect()
            return False

        self._connected = True
        return True

    async def disconnect(self) -> None:
        try:
            await self._close()
        except Exception as e:
            logger.warning(f"{self.name}: error while closing: {e}")
        self._connected = False

    async def reset(self) -> None:
        """Reopen the link and restore the last work period."""
        self._require_connection()

        await self.disconnect()
        if not await self.connect():
            raise RuntimeError(f"{self.name}: reconnect failed")
        if self._work_period is not None:
            await self.set_work_period(self._work_period)

    async def set_work_period(self, minutes: int) -> None:
        """
        Set the sensor duty cycle.

        Args:
            minutes: Work period 0-30 (0 = continuous)
        """
        self._require_connection()
        await self._apply_work_period(minutes)
        self._work_period = minutes

    async def query(self) -> Dict[str, Any]:
        self._require_connection()
        return await self._read()

    async def identify(self) -> str:
        return self.name

    async def is_connected(self) -> bool:
        return self._connected

    def _require_connection(self) -> None:
        if not self._connected:
            raise RuntimeError(f"{self.name}: not connected")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, connected={self._connected})"
