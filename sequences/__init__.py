"""
Sequences Package

This package contains measurement sequences for the station service.
Each sequence is a self-contained package with its own drivers,
protocol library and sequence logic.

Available sequences:
- sds011_monitor: SDS011 PM2.5/PM10 air quality sampling sequence
"""

__all__ = ["sds011_monitor"]
