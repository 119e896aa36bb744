"""Task descriptors emitted by the runner for every unit of work.

Purpose
-------
Normalise the loosely shaped task payloads (mappings or attribute objects)
into one immutable value object the formatter can rely on.

Contents
--------
* :class:`TaskDescriptor` - either a typed task with params or a navigation
  task identified by ``it``.
* :func:`format_duration` - milliseconds to ``"1.23s"``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


def format_duration(milliseconds: float) -> str:
    """Render ``milliseconds`` as seconds with two decimals.

    Examples
    --------
    >>> format_duration(1234)
    '1.23s'
    >>> format_duration(500)
    '0.50s'
    """

    return f"{milliseconds / 1000:.2f}s"


def _field(payload: Any, name: str, default: Any = None) -> Any:
    if isinstance(payload, Mapping):
        return payload.get(name, default)
    return getattr(payload, name, default)


@dataclass(slots=True, frozen=True)
class TaskDescriptor:
    """Immutable description of a single task.

    Attributes
    ----------
    type:
        Task kind (e.g. ``"request"``); ``None`` for navigation tasks.
    params:
        Task parameters in insertion order.
    it:
        Human name of a navigation/summary task.
    duration:
        Elapsed milliseconds once the task resolved.
    """

    type: str | None = None
    params: Mapping[str, Any] = field(default_factory=dict)
    it: str | None = None
    duration: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    @property
    def is_navigation(self) -> bool:
        """Return ``True`` for tasks identified by ``it`` instead of ``type``."""
        return self.it is not None

    @property
    def name(self) -> str:
        """Return the display name used in summary listings."""
        return self.it if self.it is not None else str(self.type or "")

    @classmethod
    def from_payload(cls, payload: Any) -> "TaskDescriptor":
        """Build a descriptor from a mapping, an object or another descriptor.

        Raises
        ------
        ValueError
            When ``params`` is neither missing nor a mapping.

        Examples
        --------
        >>> TaskDescriptor.from_payload({"it": "home", "duration": 12}).name
        'home'
        >>> list(TaskDescriptor.from_payload({"type": "get", "params": {"a": 1}}).params)
        ['a']
        """

        if isinstance(payload, TaskDescriptor):
            return payload
        params = _field(payload, "params")
        if params is None:
            params = {}
        if not isinstance(params, Mapping):
            raise ValueError(f"task params must be a mapping, got {type(params).__name__}")
        it = _field(payload, "it")
        task_type = _field(payload, "type")
        return cls(
            type=None if task_type is None else str(task_type),
            params=params,
            it=None if it is None else str(it),
            duration=_field(payload, "duration"),
        )

    def with_duration(self, duration: float | None) -> "TaskDescriptor":
        """Return a copy carrying ``duration``."""
        return TaskDescriptor(type=self.type, params=dict(self.params), it=self.it, duration=duration)


__all__ = ["TaskDescriptor", "format_duration"]
