"""Core helpers shared by the domain and service layers."""

from .clock import Clock, ManualClock, SystemClock
from .logging import configure_logging, get_logger

__all__ = [
    "Clock",
    "ManualClock",
    "SystemClock",
    "configure_logging",
    "get_logger",
]
