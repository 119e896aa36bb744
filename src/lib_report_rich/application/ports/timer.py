"""Ports for the repeating timer driving the spinner."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable


@runtime_checkable
class TimerHandle(Protocol):
    """Handle of a live repeating timer."""

    def cancel(self) -> None: ...


@runtime_checkable
class TimerFactory(Protocol):
    """Start ``callback`` every ``interval`` seconds and return its handle."""

    def __call__(self, interval: float, callback: Callable[[], None]) -> TimerHandle: ...


__all__ = ["TimerFactory", "TimerHandle"]
