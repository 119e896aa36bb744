"""Adapters binding the reporter to Rich, threads, files and event buses."""

from __future__ import annotations

from .console.rich_console import RichLineWriter
from .events import EventEmitter
from .suites import JsonSuiteLookup
from .timer import ThreadTimer, start_thread_timer

__all__ = ["EventEmitter", "JsonSuiteLookup", "RichLineWriter", "ThreadTimer", "start_thread_timer"]
