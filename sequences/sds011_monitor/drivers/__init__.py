"""Hardware drivers for the SDS011 monitor sequence."""

from .base import DustSensorDriver
from .sds011 import SDS011Driver

__all__ = ["DustSensorDriver", "SDS011Driver"]
