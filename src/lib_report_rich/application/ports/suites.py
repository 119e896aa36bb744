"""Port resolving suite references into :class:`SuiteDefinition` objects."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from lib_report_rich.domain.suites import SuiteDefinition


@runtime_checkable
class SuiteLookup(Protocol):
    """Resolve ``ref``; implementations may raise when the suite is unavailable."""

    def __call__(self, ref: Any) -> SuiteDefinition | None: ...


__all__ = ["SuiteLookup"]
