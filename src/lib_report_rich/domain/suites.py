"""Suite definitions resolved from a suite reference."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import PurePath
from types import MappingProxyType
from typing import Any


def suite_name(ref: Any) -> str:
    """Return the display name of a suite reference.

    Accepts path-like references, strings and objects exposing ``name``.

    Examples
    --------
    >>> suite_name("suites/login.json")
    'login'
    >>> suite_name("checkout")
    'checkout'
    """

    name = getattr(ref, "name", None) if not isinstance(ref, (str, PurePath)) else None
    if isinstance(ref, Mapping):
        name = ref.get("name")
    basename = PurePath(str(name if name is not None else ref)).name
    if basename.endswith(".json"):
        return basename[: -len(".json")]
    return basename


def suite_label(ref: Any) -> str:
    """Return the identifier shown in the ``begin`` header (basename kept).

    >>> suite_label({"name": "a.json"})
    'a.json'
    """

    if isinstance(ref, Mapping):
        return str(ref.get("name", ref))
    if isinstance(ref, (str, PurePath)):
        return str(ref)
    name = getattr(ref, "name", None)
    return str(name if name is not None else ref)


@dataclass(slots=True, frozen=True)
class SuiteDefinition:
    """Configuration and ordered tasks of one suite."""

    config: Mapping[str, Any] = field(default_factory=dict)
    tasks: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "config", MappingProxyType(dict(self.config)))
        object.__setattr__(self, "tasks", tuple(self.tasks))

    @property
    def describe(self) -> str | None:
        value = self.config.get("describe")
        return None if value in (None, "") else str(value)

    @property
    def url(self) -> str | None:
        value = self.config.get("url")
        return None if value is None else str(value)

    @property
    def task_count(self) -> int:
        """Number of tasks including the implicit navigation task."""
        return len(self.tasks) + 1

    def extra_config(self) -> dict[str, Any]:
        """Return the configuration without ``url`` and ``describe``."""
        return {key: value for key, value in self.config.items() if key not in ("url", "describe")}

    @classmethod
    def from_payload(cls, payload: Any) -> "SuiteDefinition":
        """Validate and build a definition from decoded JSON.

        Raises
        ------
        ValueError
            When ``config`` is not a mapping or ``tasks`` is not a list.
        """

        if not isinstance(payload, Mapping):
            raise ValueError("suite definition must be a mapping")
        config = payload.get("config")
        tasks = payload.get("tasks")
        if not isinstance(config, Mapping):
            raise ValueError("suite definition requires a 'config' mapping")
        if not isinstance(tasks, Sequence) or isinstance(tasks, (str, bytes)):
            raise ValueError("suite definition requires a 'tasks' list")
        return cls(config=config, tasks=tuple(tasks))


__all__ = ["SuiteDefinition", "suite_label", "suite_name"]
