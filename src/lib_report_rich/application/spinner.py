"""Spinner controller animating the single pending line.

Purpose
-------
Own the repeating timer, the glyph index and the pending render callback so a
new pending task, a resolution or the final report can supersede the
animation atomically.

Contents
--------
* :class:`SpinnerController` - idle/spinning state machine.

System Role
-----------
Used exclusively by :class:`lib_report_rich.application.reporter.Reporter`.
Ticks arrive on the timer's thread; ``lock`` serialises them with the
reporter's own writes so a tick never lands after :meth:`stop` returned.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from lib_report_rich.application.ports.console import LineWriterPort
from lib_report_rich.application.ports.timer import TimerFactory, TimerHandle
from lib_report_rich.domain.spinners import SPINNER_INTERVAL, selected_glyphs
from lib_report_rich.domain.styled import StyledText

from .formatting import build_pending_frame

LOGGER = logging.getLogger(__name__)


class SpinnerController:
    """Animate ``render()`` on the current line until stopped.

    Examples
    --------
    >>> class Writer:
    ...     def __init__(self):
    ...         self.lines = []
    ...     def write(self, text, *, end="\\n", truncate=False):
    ...         self.lines.append(str(text))
    ...     def clear_line(self):
    ...         pass
    >>> class Handle:
    ...     def cancel(self):
    ...         pass
    >>> writer = Writer()
    >>> spinner = SpinnerController(writer, lambda interval, callback: Handle(), glyphs="ab")
    >>> from lib_report_rich.domain.styled import styled
    >>> spinner.start(lambda: styled("task"))
    >>> spinner.tick(); spinner.tick(); spinner.tick()
    >>> [line.strip() for line in writer.lines]
    ['[ a ] task', '[ b ] task', '[ a ] task']
    >>> spinner.stop(); spinner.spinning
    False
    """

    def __init__(
        self,
        writer: LineWriterPort,
        timer_factory: TimerFactory,
        *,
        glyphs: str | None = None,
        interval: float = SPINNER_INTERVAL,
        lock: threading.RLock | None = None,
    ) -> None:
        self._writer = writer
        self._timer_factory = timer_factory
        self._glyphs = glyphs if glyphs is not None else selected_glyphs()
        if not self._glyphs:
            raise ValueError("glyphs must contain at least one character")
        self._interval = interval
        self._lock = lock if lock is not None else threading.RLock()
        self._timer: TimerHandle | None = None
        self._render: Callable[[], StyledText] | None = None
        self._index = 0
        self._generation = 0

    @property
    def lock(self) -> threading.RLock:
        """Lock guarding the current terminal line."""
        return self._lock

    @property
    def spinning(self) -> bool:
        """Whether an animation timer is live."""
        return self._timer is not None

    @property
    def index(self) -> int:
        """Index of the glyph drawn by the next tick."""
        return self._index

    def start(self, render: Callable[[], StyledText]) -> None:
        """Supersede any running animation and start animating ``render``."""
        with self._lock:
            self._cancel()
            self._index = 0
            self._render = render
            self._generation += 1
            generation = self._generation
            self._timer = self._timer_factory(self._interval, lambda: self._tick(generation))

    def stop(self) -> None:
        """Cancel the animation; calling it while idle is a no-op."""
        with self._lock:
            self._cancel()

    def tick(self) -> None:
        """Draw the next frame of the current animation."""
        self._tick(self._generation)

    def _tick(self, generation: int) -> None:
        with self._lock:
            if self._timer is None or generation != self._generation or self._render is None:
                return
            frame = build_pending_frame(self._glyphs[self._index], self._render())
            self._writer.clear_line()
            self._writer.write(frame, end="", truncate=True)
            self._index = (self._index + 1) % len(self._glyphs)

    def _cancel(self) -> None:
        timer = self._timer
        self._timer = None
        self._render = None
        self._generation += 1
        if timer is not None:
            timer.cancel()


__all__ = ["SpinnerController"]
