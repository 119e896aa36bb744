"""Thread-based repeating timer driving the spinner animation.

Purpose
-------
Provide the :class:`TimerFactory` used in production: each timer owns a
daemon thread that calls back every ``interval`` seconds until cancelled.

System Role
-----------
Ticks run on the timer thread; the spinner controller serialises them with the
reporter's writes, so this adapter only guarantees that ``cancel`` never
blocks and that callback failures do not stop the loop.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from lib_report_rich.application.ports.timer import TimerHandle


LOGGER = logging.getLogger(__name__)


class ThreadTimer(TimerHandle):
    """Call ``callback`` every ``interval`` seconds on a daemon thread.

    Examples
    --------
    >>> ticks = threading.Event()
    >>> timer = start_thread_timer(0.01, ticks.set)
    >>> ticks.wait(1.0)
    True
    >>> timer.cancel()
    >>> timer.cancelled
    True
    """

    def __init__(self, interval: float, callback: Callable[[], None], *, name: str = "lib_report_rich-spinner") -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._interval = interval
        self._callback = callback
        self._cancelled = threading.Event()
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)

    def start(self) -> "ThreadTimer":
        """Start the background thread and return ``self``."""
        self._thread.start()
        return self

    def cancel(self) -> None:
        """Stop scheduling further callbacks without waiting for the thread."""
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def join(self, timeout: float | None = None) -> None:
        """Wait for the thread to exit after :meth:`cancel`."""
        self._thread.join(timeout)

    def _run(self) -> None:
        while not self._cancelled.wait(self._interval):
            try:
                self._callback()
            except Exception as exc:  # noqa: BLE001
                LOGGER.error("Timer callback raised an exception; continuing", exc_info=exc)


def start_thread_timer(interval: float, callback: Callable[[], None]) -> ThreadTimer:
    """:class:`TimerFactory` implementation returning a started :class:`ThreadTimer`."""
    return ThreadTimer(interval, callback).start()


__all__ = ["ThreadTimer", "start_thread_timer"]
