"""Telemetry for search path admission and lookup events."""

from .logger import SearchLogger

__all__ = ["SearchLogger"]
