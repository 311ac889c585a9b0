"""
SDS011 Driver Module

Driver for polling a Nova SDS011 dust sensor over UART.
Wraps the sds011_protocol package for sequence integration.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

from .base import DustSensorDriver
from ..libs.sds011_protocol import SDS011Client
from ..libs.sds011_protocol.constants import DEFAULT_PORT, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


class SDS011Driver(DustSensorDriver):
    """
    SDS011 Driver.

    Keeps one passive-mode client open and runs its blocking calls
    in the default executor.

    Attributes:
        port: Serial port path
        timeout: Read timeout in seconds
    """

    def __init__(
        self,
        name: str = "SDS011Driver",
        config: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize SDS011 driver.

        Args:
            name: Driver name
            config: Configuration with keys:
                - port: Serial port (default: "/dev/ttyUSB0")
                - timeout: Read timeout (default: 2.0)
        """
        super().__init__(name=name, config=config)

        self.port: str = self.config.get("port", DEFAULT_PORT)
        self.timeout: float = self.config.get("timeout", DEFAULT_TIMEOUT)

        self._client: Optional[SDS011Client] = None

    async def _open(self) -> None:
        logger.info(f"Connecting to SDS011 on {self.port}")
        self._client = await self._run_sync(
            SDS011Client.open, self.port, timeout=self.timeout
        )
        logger.info(f"Connected to SDS011 on {self.port}")

    async def _close(self) -> None:
        if self._client:
            client, self._client = self._client, None
            client.close()
            logger.info("Disconnected from SDS011")

    async def _apply_work_period(self, minutes: int) -> None:
        await self._run_sync(self._client.set_work_period, minutes)

    async def _read(self) -> Dict[str, Any]:
        message = await self._run_sync(self._client.query)
        return message.to_dict()

    async def identify(self) -> str:
        return f"Nova,SDS011,{self.port}"

    async def _run_sync(self, func, *args, **kwargs) -> Any:
        """
        Run synchronous function in executor.

        The sds011_protocol client uses blocking serial reads,
        so we run it in a thread pool to avoid blocking the loop.
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, lambda: func(*args, **kwargs))
