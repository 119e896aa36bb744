"""Line writer port describing terminal emission contracts.

Purpose
-------
Let the reporter write styled lines and rewind the current terminal line
without knowing which styling library renders them.

Contents
--------
* :class:`LineWriterPort` - runtime-checkable protocol with ``write`` and
  ``clear_line``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_report_rich.domain.styled import StyledText


@runtime_checkable
class LineWriterPort(Protocol):
    """Serialise styled text to a terminal-like stream."""

    def write(self, text: StyledText | str, *, end: str = "\n", truncate: bool = False) -> None:
        """Write ``text`` followed by ``end``; cap to the usable width when ``truncate``."""

    def clear_line(self) -> None:
        """Erase the current line and move the cursor to column 0."""


__all__ = ["LineWriterPort"]
