from __future__ import annotations

import logging
from collections.abc import Callable
from io import StringIO
from typing import Any

import pytest
from rich.console import Console

from lib_report_rich.adapters.console.rich_console import RichLineWriter
from lib_report_rich.application.reporter import Reporter
from lib_report_rich.application.spinner import SpinnerController
from lib_report_rich.domain.suites import SuiteDefinition


class ManualTimer:
    """Timer handle whose ticks are fired explicitly by the test."""

    def __init__(self, interval: float, callback: Callable[[], None]) -> None:
        self.interval = interval
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            self.callback()


class ManualTimerFactory:
    def __init__(self) -> None:
        self.timers: list[ManualTimer] = []

    def __call__(self, interval: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(interval, callback)
        self.timers.append(timer)
        return timer

    @property
    def last(self) -> ManualTimer:
        return self.timers[-1]

    @property
    def live(self) -> list[ManualTimer]:
        return [timer for timer in self.timers if not timer.cancelled]


class RecordingWriter:
    """Line writer capturing plain text and clear calls in order."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    def write(self, text: Any, *, end: str = "\n", truncate: bool = False) -> None:
        self.calls.append(("write", str(text) + end))

    def clear_line(self) -> None:
        self.calls.append(("clear", None))

    @property
    def writes(self) -> list[str]:
        return [payload for kind, payload in self.calls if kind == "write"]

    @property
    def output(self) -> str:
        return "".join(self.writes)


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=200, color_system=None)


@pytest.fixture
def timers() -> ManualTimerFactory:
    return ManualTimerFactory()


@pytest.fixture
def writer() -> RecordingWriter:
    return RecordingWriter()


@pytest.fixture
def suites() -> dict[str, SuiteDefinition]:
    return {
        "login.json": SuiteDefinition(
            config={"describe": "Sign in", "url": "https://example.test", "retries": 2},
            tasks=({"type": "fill"}, {"type": "click"}),
        )
    }


@pytest.fixture
def make_reporter(timers: ManualTimerFactory, suites: dict[str, SuiteDefinition]) -> Callable[..., Reporter]:
    def factory(writer: Any, **kwargs: Any) -> Reporter:
        spinner = SpinnerController(writer, timers, glyphs=kwargs.pop("glyphs", None))
        kwargs.setdefault("suite_lookup", suites.__getitem__)
        return Reporter(writer, spinner, **kwargs)

    return factory


@pytest.fixture
def rich_writer(record_console: Console) -> RichLineWriter:
    return RichLineWriter(console=record_console)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers and propagation changes made by ``configure_logging``."""

    logger = logging.getLogger("lib_report_rich")
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
