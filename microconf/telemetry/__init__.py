"""Telemetry helpers.

This package emits structured parse events for diagnostics.
"""

from .logger import ParseLogger

__all__ = ["ParseLogger"]
