#!/usr/bin/env python3
"""
sds011-monitor - poll a Nova SDS011 dust sensor from the command line.

Switches the sensor to passive mode, sets its work period and prints one
reading per poll until interrupted.

Examples:
  # poll forever, one reading every 5 minutes (the work period)
  sds011-monitor --port /dev/ttyUSB0 --work 5

  # continuous mode, 10 readings, 3 s apart, as CSV
  sds011-monitor -w 0 -n 10 -i 3 --format csv
"""
import argparse
import json
import logging
import sys
import time
from typing import List, Optional

from .libs.sds011_protocol import SDS011Client, SDS011Error, Message
from .libs.sds011_protocol.constants import DEFAULT_PORT, DEFAULT_TIMEOUT, MAX_WORK_PERIOD

logger = logging.getLogger(__name__)

DEFAULT_WORK_PERIOD = 5
CONTINUOUS_POLL_INTERVAL = 5.0


def format_message(message: Message, fmt: str) -> str:
    if fmt == "csv":
        return message.to_csv()
    if fmt == "json":
        return json.dumps(message.to_dict())
    return str(message)


def poll_interval(work_period: int, interval: Optional[float]) -> float:
    """Seconds to wait between queries; follows the work period unless overridden."""
    if interval is not None:
        return interval
    if work_period == 0:
        return CONTINUOUS_POLL_INTERVAL
    return work_period * 60.0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="sds011-monitor", description="Reads data from Nova SDS011 sensor")
    p.add_argument("-p", "--port", default=DEFAULT_PORT, help=f"Serial port the sensor is connected to (default: {DEFAULT_PORT}).")
    p.add_argument("-w", "--work", dest="work_period", type=int, default=DEFAULT_WORK_PERIOD,
                   help=f"Work period in minutes, 0-{MAX_WORK_PERIOD} (default: {DEFAULT_WORK_PERIOD}).")
    p.add_argument("-n", "--count", type=int, default=0, help="Number of queries to send, failed ones included, 0 = forever (default: 0).")
    p.add_argument("-i", "--interval", type=float, default=None,
                   help="Seconds between queries (default: work period, or 5 s in continuous mode).")
    p.add_argument("-t", "--timeout", type=float, default=DEFAULT_TIMEOUT, help="Serial read timeout in seconds.")
    p.add_argument("-f", "--format", choices=["text", "csv", "json"], default="text", help="Output format.")
    p.add_argument("-v", "--verbose", action="store_true", help="Log frames as hex.")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not 0 <= args.work_period <= MAX_WORK_PERIOD:
        logger.error(f"Work period must be 0-{MAX_WORK_PERIOD} minutes, got {args.work_period}")
        return 2

    if args.interval is not None and args.interval < 0:
        logger.error(f"Interval must not be negative, got {args.interval}")
        return 2
    if args.count < 0:
        logger.error(f"Count must not be negative, got {args.count}")
        return 2

    try:
        sensor = SDS011Client.open(args.port, timeout=args.timeout)
    except SDS011Error as e:
        logger.error(f"Could not open sensor on {args.port}: {e}")
        return 1

    delay = poll_interval(args.work_period, args.interval)
    sent = 0
    with sensor:
        try:
            sensor.set_work_period(args.work_period)
        except SDS011Error as e:
            logger.error(f"Could not set work period: {e}")
            return 1

        try:
            while True:
                try:
                    print(format_message(sensor.query(), args.format), flush=True)
                except SDS011Error as e:
                    logger.warning(f"Query failed: {e}")

                sent += 1
                if args.count and sent >= args.count:
                    break
                time.sleep(delay)
        except KeyboardInterrupt:
            logger.info("Stopped")

    return 0


if __name__ == "__main__":
    sys.exit(main())
