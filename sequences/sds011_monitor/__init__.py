"""
SDS011 Monitor Sequence Package

Provides PM2.5/PM10 sampling with the Nova SDS011 laser dust sensor.
"""

__all__ = ["SDS011MonitorSequence"]


def __getattr__(name):
    # The sequence needs station_service_sdk; keep the protocol usable without it
    if name == "SDS011MonitorSequence":
        from .sequence import SDS011MonitorSequence
        return SDS011MonitorSequence
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
