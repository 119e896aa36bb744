"""Static rendering constants: spinner glyphs, indentation and width limits."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping


SPINNERS: Mapping[str, str] = MappingProxyType(
    {
        "dots": "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏",
        "box": "┤┘┴└├┌┬┐",
    }
)
"""Predefined glyph sequences; each character is one animation frame."""

SELECTED_SPINNER = "box"

SPINNER_INTERVAL = 0.08
"""Seconds between two spinner frames."""

INDENT = "    "

MAX_PARAM_LENGTH = 20
"""Longest rendered parameter value before it gets cut with an ellipsis."""

ELLIPSIS = "..."

LINE_MARGIN = 10
"""Columns kept free at the right edge when capping spinner lines."""


def selected_glyphs() -> str:
    """Return the glyph sequence chosen by :data:`SELECTED_SPINNER`.

    >>> len(selected_glyphs())
    8
    """

    return SPINNERS[SELECTED_SPINNER]


__all__ = [
    "ELLIPSIS",
    "INDENT",
    "LINE_MARGIN",
    "MAX_PARAM_LENGTH",
    "SELECTED_SPINNER",
    "SPINNERS",
    "SPINNER_INTERVAL",
    "selected_glyphs",
]
