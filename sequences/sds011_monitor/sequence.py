"""
SDS011 Monitor Sequence Module (SDK 2.0)

Air quality sampling sequence for the Nova SDS011 dust sensor.

This module uses the SDK 2.0 SequenceBase pattern with:
- setup(): Hardware initialization
- run(): Step-by-step execution with emit_* helpers
- teardown(): Resource cleanup
"""

import asyncio
import logging
import time
from typing import Any, Dict, List, Optional

from station_service_sdk import (
    SequenceBase,
    RunResult,
    ExecutionContext,
    SetupError,
)

logger = logging.getLogger(__name__)

# Lazy import for driver - allows metadata extraction without pyserial
SDS011Driver = None


def _get_driver_class():
    """Load driver class at runtime."""
    global SDS011Driver
    if SDS011Driver is None:
        from .drivers.sds011 import SDS011Driver as _Driver
        SDS011Driver = _Driver
    return SDS011Driver


class SDS011MonitorSequence(SequenceBase):
    """
    SDS011 Monitor Sequence (SDK 2.0).

    Configures the sensor duty cycle, takes a series of PM2.5/PM10
    readings and checks them against concentration limits.

    Attributes:
        name: Sequence identifier
        version: Semantic version
        description: Human-readable description
    """

    # Class-level metadata (required by SequenceBase)
    name = "sds011_monitor"
    version = "1.0.0"
    description = "SDS011 PM2.5/PM10 air quality sampling"

    def __init__(
        self,
        context: ExecutionContext,
        hardware_config: Optional[Dict[str, Dict[str, Any]]] = None,
        parameters: Optional[Dict[str, Any]] = None,
        **kwargs,
    ) -> None:
        """
        Initialize sequence.

        Args:
            context: Execution context from Station Service
            hardware_config: Hardware configuration dictionary
            parameters: Sampling parameters dictionary
            **kwargs: Additional arguments for SequenceBase
        """
        super().__init__(
            context=context,
            hardware_config=hardware_config,
            parameters=parameters,
            **kwargs,
        )

        # Sensor driver instance (initialized in setup)
        self.sensor: Optional[Any] = None

        self._load_parameters()

        logger.debug(f"Initialized {self.name} v{self.version}")

    def _load_parameters(self) -> None:
        """Read parameters with defaults; numbers may arrive as strings from JSON config."""
        # Link parameters
        self.port: str = self.get_parameter("port", "/dev/ttyUSB0")
        self.timeout: float = float(self.get_parameter("timeout", 2.0))

        # Sampling parameters
        self.work_period: int = int(self.get_parameter("work_period", 0))
        self.sample_count: int = int(self.get_parameter("sample_count", 5))
        self.poll_interval: float = float(self.get_parameter("poll_interval", 1.0))

        # Concentration limits in ug/m3
        self.pm25_limit: float = float(self.get_parameter("pm25_limit", 25.0))
        self.pm10_limit: float = float(self.get_parameter("pm10_limit", 50.0))

        self.stop_on_failure: bool = self.get_parameter("stop_on_failure", True)

    # =========================================================================
    # Lifecycle Methods (Required by SequenceBase)
    # =========================================================================

    async def setup(self) -> None:
        """
        Connect to the sensor.

        Raises:
            SetupError: If the sensor cannot be opened
        """
        self.emit_log("info", "Initializing hardware...")

        if self.context.dry_run:
            self.emit_log("info", "Dry run - using simulated sensor")
            self.sensor = self.context.hardware.get("sds011")
            if self.sensor:
                await self.sensor.connect()
            return

        try:
            hw_config = self.get_hardware_config("sds011")
            port = hw_config.get("port", self.port)
            timeout = hw_config.get("timeout", self.timeout)

            self.emit_log("info", f"Connecting to SDS011: {port}")

            driver_class = _get_driver_class()
            self.sensor = driver_class(config={
                "port": port,
                "timeout": timeout,
            })

            connected = await self.sensor.connect()
            if not connected:
                raise SetupError("SDS011 connection failed", details={"error_code": "SDS011_CONNECTION_FAILED"})

            idn = await self.sensor.identify()
            self.emit_log("info", f"Connected: {idn}")

        except SetupError:
            raise
        except Exception as e:
            raise SetupError(f"Hardware initialization failed: {e}", details={"original_error": str(e)})

    async def run(self) -> RunResult:
        """
        Execute the sampling sequence.

        Returns:
            RunResult with passed status and measurements
        """
        total_steps = 3
        current_step = 0
        all_passed = True
        measurements: Dict[str, Any] = {}
        samples: List[Dict[str, Any]] = []

        # =====================================================================
        # Step 1: Work Period
        # =====================================================================
        current_step += 1
        self.emit_step_start("set_work_period", current_step, total_steps, "Set sensor work period")
        start_time = time.time()

        try:
            self.check_abort()

            if self.sensor:
                await self.sensor.set_work_period(self.work_period)
                self.emit_log("info", f"Work period set to {self.work_period} min")
                measurements["work_period_min"] = self.work_period

            duration = time.time() - start_time
            self.emit_step_complete("set_work_period", current_step, True, duration)

        except Exception as e:
            duration = time.time() - start_time
            self.emit_step_complete("set_work_period", current_step, False, duration, error=str(e))
            self.emit_error("WORK_PERIOD_ERROR", str(e))
            all_passed = False
            if self.stop_on_failure:
                return {"passed": False, "measurements": measurements, "data": {"stopped_at": "set_work_period"}}

        # =====================================================================
        # Step 2: Sampling
        # =====================================================================
        current_step += 1
        self.emit_step_start("sample", current_step, total_steps, f"Take {self.sample_count} readings")
        start_time = time.time()
        failed_queries = 0

        for index in range(self.sample_count):
            self.check_abort()

            if not self.sensor:
                break

            try:
                sample = await self.sensor.query()
            except Exception as e:
                failed_queries += 1
                self.emit_log("warning", f"Query {index + 1} failed: {e}")
            else:
                samples.append(sample)
                pm25_passed = sample["pm25"] <= self.pm25_limit
                pm10_passed = sample["pm10"] <= self.pm10_limit

                self.emit_measurement(
                    name="pm25",
                    value=sample["pm25"],
                    unit="ug/m3",
                    passed=pm25_passed,
                    max_value=self.pm25_limit,
                )
                self.emit_measurement(
                    name="pm10",
                    value=sample["pm10"],
                    unit="ug/m3",
                    passed=pm10_passed,
                    max_value=self.pm10_limit,
                )

                if not (pm25_passed and pm10_passed):
                    all_passed = False
                    self.emit_log("warning", f"Reading over limit: PM2.5={sample['pm25']} PM10={sample['pm10']}")

            # Same spacing after a failed query; no immediate retry
            if index < self.sample_count - 1:
                await asyncio.sleep(self.poll_interval)

        measurements["sample_count"] = len(samples)
        measurements["failed_queries"] = failed_queries

        duration = time.time() - start_time
        step_passed = bool(samples) or not self.sensor
        self.emit_step_complete("sample", current_step, step_passed, duration)

        if not step_passed:
            all_passed = False
            self.emit_error("QUERY_ERROR", f"All {self.sample_count} queries failed")
            if self.stop_on_failure:
                return {"passed": False, "measurements": measurements, "data": {"stopped_at": "sample"}}

        # =====================================================================
        # Step 3: Finalize
        # =====================================================================
        current_step += 1
        self.emit_step_start("finalize", current_step, total_steps, "Summarize readings")
        start_time = time.time()

        if samples:
            measurements["pm25_avg"] = round(sum(s["pm25"] for s in samples) / len(samples), 1)
            measurements["pm10_avg"] = round(sum(s["pm10"] for s in samples) / len(samples), 1)
            measurements["pm25_max"] = max(s["pm25"] for s in samples)
            measurements["pm10_max"] = max(s["pm10"] for s in samples)

        self.emit_log("info", f"Sampling complete - result: {'PASS' if all_passed else 'FAIL'}")

        duration = time.time() - start_time
        self.emit_step_complete("finalize", current_step, True, duration)

        return {
            "passed": all_passed,
            "measurements": measurements,
            "data": {"samples": samples},
        }

    async def teardown(self) -> None:
        """
        Disconnect the sensor.

        Always called, even if setup or run failed.
        """
        self.emit_log("info", "Releasing resources...")

        try:
            if self.sensor:
                if await self.sensor.is_connected():
                    await self.sensor.disconnect()
                    self.emit_log("info", "SDS011 disconnected")

        except Exception as e:
            self.emit_log("warning", f"Cleanup error (ignored): {e}")

        self.sensor = None
        self.emit_log("info", "Resources released")
