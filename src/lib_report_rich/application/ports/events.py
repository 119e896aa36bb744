"""Port for runner-like objects the reporter subscribes to."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class EventSource(Protocol):
    """Register ``handler`` for the named lifecycle event."""

    def on(self, event: str, handler: Callable[..., Any]) -> Any: ...


__all__ = ["EventSource"]
