#!/usr/bin/env python3
"""
SDS011 Monitor Sequence - CLI Entry Point (SDK 2.0)

This module provides the CLI entry point for running the sequence
as a subprocess from Station Service.

Usage:
    python -m sequences.sds011_monitor.main --start --config '{"sample_count": 10}'
    python -m sequences.sds011_monitor.main --start --dry-run
    python -m sequences.sds011_monitor.main --stop
"""

from sequences.sds011_monitor.sequence import SDS011MonitorSequence

if __name__ == "__main__":
    exit(SDS011MonitorSequence.run_from_cli())
