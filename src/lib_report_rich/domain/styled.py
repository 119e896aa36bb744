"""Library-independent styled text model.

Purpose
-------
Describe console output as plain text fragments tagged with semantic roles so
the formatting rules never depend on a concrete terminal-styling library.

Contents
--------
* :class:`Role` - semantic roles understood by console adapters.
* :class:`Span` / :class:`StyledText` - immutable fragments and their sequence.
* :func:`styled` - convenience constructor for a single-span text.

System Role
-----------
Produced by :mod:`lib_report_rich.application.formatting`, consumed by the
Rich line writer which maps each role to a Rich style.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class Role(Enum):
    """Semantic styling roles, outermost first when nested."""

    INFO = "info"
    PENDING = "pending"
    ERROR = "error"
    SUCCESS = "success"
    WARN = "warn"
    STRONG = "strong"
    KEY = "key"
    VALUE = "value"
    DURATION = "duration"
    PANEL = "panel"
    SUITE = "suite"
    BADGE = "badge"
    ALERT = "alert"
    MUTED = "muted"


@dataclass(slots=True, frozen=True)
class Span:
    """A run of text sharing the same ordered set of roles."""

    text: str
    roles: tuple[Role, ...] = ()


@dataclass(slots=True, frozen=True)
class StyledText:
    """Immutable sequence of :class:`Span` objects.

    Examples
    --------
    >>> line = styled("a", Role.STRONG) + " b"
    >>> line.plain
    'a b'
    >>> line.wrap(Role.INFO).spans[0].roles
    (<Role.INFO: 'info'>, <Role.STRONG: 'strong'>)
    """

    spans: tuple[Span, ...] = ()

    @property
    def plain(self) -> str:
        """Return the text with all styling removed."""
        return "".join(span.text for span in self.spans)

    def wrap(self, *roles: Role) -> "StyledText":
        """Return a copy with ``roles`` applied outside every span's own roles."""
        return StyledText(tuple(Span(span.text, roles + span.roles) for span in self.spans))

    def __add__(self, other: "StyledText | str") -> "StyledText":
        if isinstance(other, str):
            other = StyledText((Span(other),)) if other else StyledText()
        if not isinstance(other, StyledText):
            return NotImplemented
        return StyledText(self.spans + other.spans)

    def __radd__(self, other: str) -> "StyledText":
        if not isinstance(other, str):
            return NotImplemented
        return styled(other) + self

    def __len__(self) -> int:
        return len(self.plain)

    def __str__(self) -> str:
        return self.plain


def styled(text: str, *roles: Role) -> StyledText:
    """Build a single-span :class:`StyledText` (empty text yields no spans)."""
    if not text:
        return StyledText()
    return StyledText((Span(text, tuple(roles)),))


def join(parts: Iterable[StyledText | str]) -> StyledText:
    """Concatenate ``parts`` into one :class:`StyledText`."""
    result = StyledText()
    for part in parts:
        result = result + part
    return result


__all__ = ["Role", "Span", "StyledText", "join", "styled"]
