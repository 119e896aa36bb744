"""Final run report emitted once by the runner at ``finish``.

Purpose
-------
Give the summary renderer a typed view of the runner's timing statistics and
its grouping of failed tests by error category.

Contents
--------
* :class:`Timing` - total duration, slowest test and above-median tests.
* :class:`ErrorInfo` / :class:`ErrorGroup` - one ``byError`` entry.
* :class:`Report` - aggregate parsed by :meth:`Report.from_payload`.

System Role
-----------
Pure data; the reporter never acts on these errors, it only displays them.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from .tasks import TaskDescriptor, _field


def _unwrap_test(wrapper: Any) -> TaskDescriptor:
    """Return the task stored under ``test`` in a runner wrapper."""
    test = _field(wrapper, "test")
    if test is None:
        raise ValueError("report entry is missing its 'test' field")
    return TaskDescriptor.from_payload(test)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _indexed_entries(payload: Any) -> list[Any]:
    """Return the values stored under integer-like keys, in index order.

    >>> _indexed_entries({"error": {}, "1": "b", "0": "a"})
    ['a', 'b']
    """

    if not isinstance(payload, Mapping):
        return []
    indexed: list[tuple[int, Any]] = []
    for key, value in payload.items():
        if isinstance(key, int) and not isinstance(key, bool):
            indexed.append((key, value))
        elif isinstance(key, str) and key.isdigit():
            indexed.append((int(key), value))
    return [value for _, value in sorted(indexed, key=lambda item: item[0])]


_PARSE_ERRORS = (ValueError, TypeError, KeyError)


@dataclass(slots=True, frozen=True)
class Timing:
    """Timing statistics for the whole run (milliseconds)."""

    total: float
    slowest: TaskDescriptor | None = None
    above: tuple[TaskDescriptor, ...] = ()

    @classmethod
    def from_payload(cls, payload: Any, skipped: list[str] | None = None) -> "Timing":
        """Parse the ``timing`` section.

        Malformed ``slowest``/``above`` wrappers raise ``ValueError`` unless a
        ``skipped`` list is given, in which case their locations are appended
        to it and the entries are left out.
        """

        def unwrap(wrapper: Any, location: str) -> TaskDescriptor | None:
            if skipped is None:
                return _unwrap_test(wrapper)
            try:
                return _unwrap_test(wrapper)
            except _PARSE_ERRORS:
                skipped.append(location)
                return None

        total = _field(payload, "total", 0) or 0
        slowest_payload = _field(payload, "slowest")
        slowest = None
        if slowest_payload is not None and _field(slowest_payload, "test") is not None:
            slowest = unwrap(slowest_payload, "timing.slowest")
        above: list[TaskDescriptor] = []
        for index, entry in enumerate(_field(payload, "above") or ()):
            test = unwrap(entry, f"timing.above[{index}]")
            if test is not None:
                above.append(test)
        return cls(total=float(total), slowest=slowest, above=tuple(above))


@dataclass(slots=True, frozen=True)
class ErrorInfo:
    """Error category and its opaque details."""

    type: str
    details: Any = None


@dataclass(slots=True, frozen=True)
class ErrorGroup:
    """Tests that failed with the same error ``key``."""

    key: str
    error: ErrorInfo
    tests: tuple[TaskDescriptor, ...] = ()

    @classmethod
    def from_payload(cls, key: str, payload: Any) -> "ErrorGroup":
        """Parse one ``byError`` entry.

        The affected tests are read from a ``tests`` list, from integer-like
        keys next to ``error`` (``{"error": {...}, "0": {"test": ...}}``), or
        from a sequence of ``{"test": ...}`` wrappers carrying an ``error``
        attribute.

        Examples
        --------
        >>> group = ErrorGroup.from_payload("E1", {"error": {"type": "status"}, "tests": [{"test": {"it": "home"}}]})
        >>> group.error.type, group.tests[0].it
        ('status', 'home')
        >>> indexed = ErrorGroup.from_payload("E2", {"error": {"type": "status"}, "0": {"test": {"it": "cart"}}})
        >>> [test.it for test in indexed.tests]
        ['cart']
        """

        error_payload = _field(payload, "error")
        if error_payload is None:
            raise ValueError(f"error group {key!r} is missing its 'error' field")
        if _is_sequence(payload):
            wrappers = payload
        else:
            wrappers = _field(payload, "tests")
            if wrappers is None:
                wrappers = _indexed_entries(payload)
        error = ErrorInfo(type=str(_field(error_payload, "type", "")), details=_field(error_payload, "details"))
        return cls(key=str(key), error=error, tests=tuple(_unwrap_test(entry) for entry in wrappers))


@dataclass(slots=True, frozen=True)
class Report:
    """Summary handed to the reporter at ``finish``.

    ``skipped`` names the entries left out because they could not be parsed.
    """

    timing: Timing
    errors: tuple[ErrorGroup, ...] = field(default_factory=tuple)
    skipped: tuple[str, ...] = ()

    @classmethod
    def from_payload(cls, payload: Any) -> "Report":
        """Build a :class:`Report` from the runner's payload.

        A malformed error group or timing wrapper is left out and recorded in
        :attr:`skipped`; the rest of the report is kept.

        Raises
        ------
        ValueError
            When ``errors.byError`` is not a mapping or the payload itself
            cannot be read.

        Examples
        --------
        >>> report = Report.from_payload({"timing": {"total": 1500}, "errors": {"byError": {}}})
        >>> report.timing.total, report.errors
        (1500.0, ())
        >>> Report.from_payload({"timing": {"total": 1}, "errors": {"byError": {"E": {}}}}).skipped
        ("byError['E']",)
        """

        if isinstance(payload, Report):
            return payload
        skipped: list[str] = []
        try:
            timing = Timing.from_payload(_field(payload, "timing") or {}, skipped)
            by_error = _field(_field(payload, "errors") or {}, "byError") or {}
        except (TypeError, KeyError) as exc:
            raise ValueError(f"invalid report payload: {exc}") from exc
        if not isinstance(by_error, Mapping):
            raise ValueError("errors.byError must be a mapping")
        groups: list[ErrorGroup] = []
        for key, value in by_error.items():
            try:
                groups.append(ErrorGroup.from_payload(key, value))
            except _PARSE_ERRORS:
                skipped.append(f"byError[{key!r}]")
        return cls(timing=timing, errors=tuple(groups), skipped=tuple(skipped))


__all__ = ["ErrorGroup", "ErrorInfo", "Report", "Timing"]
