"""Reporter translating runner lifecycle events into console output.

Purpose
-------
Hold the per-attachment render state (spinner, in-flight errors) explicitly
and react to ``begin``/``start``/``pending``/``error``/``pass``/``fail``/
``finish`` events by writing formatted lines.

Contents
--------
* :data:`EVENTS` - names of the subscribed runner events.
* :class:`Reporter` - event handlers plus :meth:`Reporter.attach`.

System Role
-----------
Application-layer orchestrator wired by :func:`lib_report_rich.runtime.create_reporter`.
Rendering faults are logged and reported through the diagnostic hook; they
never propagate back into the runner.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from functools import wraps
from typing import Any

from lib_report_rich.application.ports.console import LineWriterPort
from lib_report_rich.application.ports.events import EventSource
from lib_report_rich.application.ports.suites import SuiteLookup
from lib_report_rich.domain.report import Report
from lib_report_rich.domain.suites import SuiteDefinition

from .formatting import (
    build_begin_header,
    build_fail_line,
    build_line,
    build_pass_line,
    build_report_lines,
    build_suite_header,
)
from .spinner import SpinnerController

LOGGER = logging.getLogger(__name__)

EVENTS: tuple[str, ...] = ("begin", "start", "pending", "error", "pass", "fail", "finish")

DiagnosticHook = Callable[[str, dict[str, Any]], None]


class Reporter:
    """Render runner events through ``writer``.

    Parameters
    ----------
    writer:
        Line writer implementing :class:`LineWriterPort`.
    spinner:
        :class:`SpinnerController` sharing ``writer``.
    suite_lookup:
        Optional callable resolving suite references; failures degrade to a
        header without task and configuration details.
    diagnostic:
        Optional callback receiving ``(name, payload)`` for internal faults.
    """

    def __init__(
        self,
        writer: LineWriterPort,
        spinner: SpinnerController,
        *,
        suite_lookup: SuiteLookup | None = None,
        diagnostic: DiagnosticHook | None = None,
    ) -> None:
        self._writer = writer
        self._spinner = spinner
        self._suite_lookup = suite_lookup
        self._diagnostic = diagnostic
        self._errors: list[Any] = []

    @property
    def errors(self) -> tuple[Any, ...]:
        """Errors observed since the last resolved task."""
        return tuple(self._errors)

    @property
    def spinner(self) -> SpinnerController:
        return self._spinner

    def attach(self, source: EventSource) -> "Reporter":
        """Subscribe every handler to ``source`` and return ``self``."""
        for event in EVENTS:
            source.on(event, self._guarded(event, getattr(self, f"on_{event}")))
        return self

    def on_begin(self, suites: Iterable[Any]) -> None:
        self._spinner.stop()
        self._print(build_begin_header(list(suites)))

    def on_start(self, ref: Any) -> None:
        self._spinner.stop()
        suite = self._load_suite(ref)
        with self._spinner.lock:
            self._writer.clear_line()
            self._writer.write(build_suite_header(ref, suite))

    def on_pending(self, task: Any) -> None:
        line = build_line(task)
        self._spinner.start(lambda: line)

    def on_error(self, error: Any) -> None:
        self._errors.append(error)

    def on_pass(self, task: Any) -> None:
        try:
            self._spinner.stop()
            self._resolve(build_pass_line(task, len(self._errors)))
        finally:
            self._errors.clear()

    def on_fail(self, task: Any, err: Any = None) -> None:
        try:
            self._spinner.stop()
            self._resolve(build_fail_line(task, err))
        finally:
            self._errors.clear()

    def on_finish(self, payload: Any) -> None:
        self._spinner.stop()
        report = Report.from_payload(payload)
        if report.skipped:
            LOGGER.warning("Report entries could not be parsed and were left out: %s", ", ".join(report.skipped))
            self._emit_diagnostic("report_entries_skipped", {"entries": list(report.skipped)})
        with self._spinner.lock:
            self._writer.clear_line()
            for line in build_report_lines(report):
                self._writer.write(line)

    def _resolve(self, line: Any) -> None:
        with self._spinner.lock:
            self._writer.clear_line()
            self._writer.write(line)

    def _print(self, line: Any) -> None:
        with self._spinner.lock:
            self._writer.write(line)

    def _load_suite(self, ref: Any) -> SuiteDefinition | None:
        """Resolve ``ref`` or return ``None`` when no detail is available."""
        if self._suite_lookup is None:
            return None
        try:
            return self._suite_lookup(ref)
        except Exception as exc:  # noqa: BLE001
            LOGGER.debug("Suite %r could not be loaded; rendering header without details", ref, exc_info=exc)
            self._emit_diagnostic("suite_lookup_failed", {"suite": str(ref), "exception": repr(exc)})
            return None

    def _guarded(self, event: str, handler: Callable[..., None]) -> Callable[..., None]:
        """Wrap ``handler`` so rendering faults never reach the runner."""

        @wraps(handler)
        def guarded(*args: Any) -> None:
            try:
                handler(*args)
            except Exception as exc:  # noqa: BLE001
                LOGGER.error("Reporter failed to render %r event; continuing", event, exc_info=exc)
                self._emit_diagnostic("render_failed", {"event": event, "exception": repr(exc)})

        return guarded

    def _emit_diagnostic(self, name: str, payload: dict[str, Any]) -> None:
        """Invoke the diagnostic hook while guarding against callback failures."""

        if self._diagnostic is None:
            return
        try:
            self._diagnostic(name, payload)
        except Exception as diagnostic_exc:  # noqa: BLE001
            LOGGER.error("Reporter diagnostic hook raised while reporting %s", name, exc_info=diagnostic_exc)


__all__ = ["DiagnosticHook", "EVENTS", "Reporter"]
