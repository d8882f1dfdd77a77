"""Telemetry and observability helpers.

This package emits structured stage events for clean, parse, and dump runs.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
