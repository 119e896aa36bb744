"""Rich console reporter for test-runner lifecycle events.

Attach a :class:`Reporter` to any runner exposing ``on(event, handler)``:

>>> from io import StringIO
>>> from rich.console import Console
>>> from lib_report_rich import EventEmitter, attach
>>> runner = EventEmitter()
>>> console = Console(file=StringIO(), record=True, width=120)
>>> reporter = attach(runner, console=console, force_color=False, no_color=True)
>>> _ = runner.emit("begin", ["a.json"])
>>> "begin 1 suite : a.json" in console.export_text()
True
"""

from __future__ import annotations

from .adapters import EventEmitter, JsonSuiteLookup, RichLineWriter
from .application.formatting import build_line
from .application.reporter import EVENTS, Reporter
from .application.spinner import SpinnerController
from .domain import Report, Role, StyledText, SuiteDefinition, TaskDescriptor
from .runtime import attach, configure_logging, create_reporter

__all__ = [
    "EVENTS",
    "EventEmitter",
    "JsonSuiteLookup",
    "Report",
    "Reporter",
    "RichLineWriter",
    "Role",
    "SpinnerController",
    "StyledText",
    "SuiteDefinition",
    "TaskDescriptor",
    "attach",
    "build_line",
    "configure_logging",
    "create_reporter",
]
