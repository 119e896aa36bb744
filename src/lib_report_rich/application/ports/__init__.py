"""Ports consumed by the application layer."""

from __future__ import annotations

from .console import LineWriterPort
from .events import EventSource
from .suites import SuiteLookup
from .timer import TimerFactory, TimerHandle

__all__ = ["EventSource", "LineWriterPort", "SuiteLookup", "TimerFactory", "TimerHandle"]
