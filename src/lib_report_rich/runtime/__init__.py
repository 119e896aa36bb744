"""Composition root wiring the reporter with its production adapters.

Purpose
-------
Expose the stable entry points host runners use (:func:`create_reporter`,
:func:`attach`) instead of importing the inner layers directly, plus the
logging setup used by the CLI.

Contents
--------
* :func:`create_reporter` - build a :class:`Reporter` from Rich, thread timer
  and JSON suite lookup adapters (each overridable).
* :func:`attach` - create a reporter and subscribe it to a runner.
* :func:`configure_logging` - route the reporter's own diagnostics to a Rich
  handler on stderr.

System Role
-----------
Forms the outer shell: the application layer only depends on ports, and the
concrete adapters are chosen here.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Mapping

from rich.console import Console
from rich.logging import RichHandler

from lib_report_rich.adapters import JsonSuiteLookup, RichLineWriter, start_thread_timer
from lib_report_rich.application.ports import EventSource, LineWriterPort, SuiteLookup, TimerFactory
from lib_report_rich.application.reporter import DiagnosticHook, Reporter
from lib_report_rich.application.spinner import SpinnerController
from lib_report_rich.config import ReporterSettings
from lib_report_rich.domain.styled import Role

LOGGER_NAME = "lib_report_rich"


def create_reporter(
    *,
    console: Console | None = None,
    writer: LineWriterPort | None = None,
    force_color: bool | None = None,
    no_color: bool | None = None,
    styles: Mapping[Role | str, str] | None = None,
    suite_lookup: SuiteLookup | None = None,
    timer_factory: TimerFactory | None = None,
    diagnostic: DiagnosticHook | None = None,
    settings: ReporterSettings | None = None,
) -> Reporter:
    """Assemble a :class:`Reporter`.

    Parameters
    ----------
    console:
        Rich console to write to; defaults to stdout.
    writer:
        Pre-built line writer; overrides ``console``/colour/style options.
    force_color, no_color:
        Colour overrides; ``None`` falls back to ``settings``.
    styles:
        Role-to-Rich-style overrides merged over the defaults.
    suite_lookup:
        Suite resolver; defaults to :class:`JsonSuiteLookup` relative to the
        working directory.
    timer_factory:
        Repeating timer factory; defaults to :func:`start_thread_timer`.
    diagnostic:
        Callback receiving internal fault notifications.
    settings:
        Environment settings; read via :meth:`ReporterSettings.from_env` when
        omitted and a colour flag is unresolved.

    Examples
    --------
    >>> from io import StringIO
    >>> reporter = create_reporter(console=Console(file=StringIO()), force_color=False, no_color=True)
    >>> reporter.spinner.spinning
    False
    """

    if writer is None:
        if force_color is None or no_color is None:
            settings = settings or ReporterSettings.from_env()
            force_color = settings.force_color if force_color is None else force_color
            no_color = settings.no_color if no_color is None else no_color
        writer = RichLineWriter(
            console=console,
            force_color=force_color,
            no_color=no_color,
            styles=dict(styles) if styles else None,
        )
    spinner = SpinnerController(writer, timer_factory or start_thread_timer, lock=threading.RLock())
    return Reporter(
        writer,
        spinner,
        suite_lookup=suite_lookup if suite_lookup is not None else JsonSuiteLookup(),
        diagnostic=diagnostic,
    )


def attach(source: EventSource, **options: Any) -> Reporter:
    """Create a reporter with ``options`` (see :func:`create_reporter`) and subscribe it to ``source``."""
    return create_reporter(**options).attach(source)


def configure_logging(level: str | int = "WARNING", *, console: Console | None = None) -> logging.Logger:
    """Send ``lib_report_rich`` diagnostics to a Rich handler on stderr.

    Reconfiguring replaces the handler installed by a previous call.
    """

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_lib_report_rich", False):
            logger.removeHandler(handler)
    handler = RichHandler(console=console or Console(stderr=True), rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    handler._lib_report_rich = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


__all__ = ["LOGGER_NAME", "attach", "configure_logging", "create_reporter"]
