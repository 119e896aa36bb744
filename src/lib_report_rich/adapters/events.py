"""Synchronous event emitter standing in for a runner.

Purpose
-------
Give callers without their own event bus an :class:`EventSource` to attach
the reporter to; handlers run in registration order on the emitting thread.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from typing import Any

from lib_report_rich.application.ports.events import EventSource


Handler = Callable[..., Any]


class EventEmitter(EventSource):
    """Minimal ``on``/``off``/``emit`` event bus.

    Examples
    --------
    >>> seen = []
    >>> emitter = EventEmitter()
    >>> _ = emitter.on("pass", seen.append)
    >>> emitter.emit("pass", "task-1")
    True
    >>> emitter.emit("fail", "task-2")
    False
    >>> seen
    ['task-1']
    """

    def __init__(self) -> None:
        self._handlers: defaultdict[str, list[Handler]] = defaultdict(list)

    def on(self, event: str, handler: Handler) -> "EventEmitter":
        """Register ``handler`` for ``event`` and return ``self`` for chaining."""
        self._handlers[event].append(handler)
        return self

    def off(self, event: str, handler: Handler) -> "EventEmitter":
        """Remove the first registration of ``handler`` for ``event`` if present."""
        handlers = self._handlers.get(event)
        if handlers and handler in handlers:
            handlers.remove(handler)
        return self

    def listeners(self, event: str) -> tuple[Handler, ...]:
        return tuple(self._handlers.get(event, ()))

    def emit(self, event: str, *args: Any) -> bool:
        """Call every handler of ``event`` with ``args``; return whether any ran."""
        handlers = list(self._handlers.get(event, ()))
        for handler in handlers:
            handler(*args)
        return bool(handlers)


__all__ = ["EventEmitter", "Handler"]
