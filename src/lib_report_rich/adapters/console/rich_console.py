"""Rich-powered line writer implementing :class:`LineWriterPort`.

Purpose
-------
Bridge the application layer with Rich: semantic roles of a
:class:`~lib_report_rich.domain.styled.StyledText` become Rich styles, and the
current line is rewound with Rich control codes.

Contents
--------
* :data:`_STYLE_MAP` - default role-to-style mapping.
* :class:`RichLineWriter` - adapter constructed by
  :func:`lib_report_rich.runtime.create_reporter`.

System Role
-----------
Primary human-facing sink; honours force/no-colour overrides.
"""

from __future__ import annotations

from typing import Mapping, MutableMapping

from rich.console import Console
from rich.control import Control
from rich.segment import ControlType
from rich.style import Style
from rich.text import Text

from lib_report_rich.application.ports.console import LineWriterPort
from lib_report_rich.domain.spinners import LINE_MARGIN
from lib_report_rich.domain.styled import Role, StyledText


#: Default Rich styles keyed by :class:`Role`.
_STYLE_MAP: Mapping[Role, str] = {
    Role.INFO: "black on white",
    Role.PENDING: "white on cyan",
    Role.ERROR: "white on red",
    Role.SUCCESS: "white on green",
    Role.WARN: "white on yellow",
    Role.STRONG: "bold",
    Role.KEY: "blue",
    Role.VALUE: "black",
    Role.DURATION: "magenta",
    Role.PANEL: "on white",
    Role.SUITE: "blue",
    Role.BADGE: "red on yellow",
    Role.ALERT: "red",
    Role.MUTED: "grey50",
}


def _coerce_role(key: Role | str) -> Role | None:
    if isinstance(key, Role):
        return key
    try:
        return Role(key.strip().lower())
    except ValueError:
        return None


class RichLineWriter(LineWriterPort):
    """Write styled lines to a Rich console and rewind the current line."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: MutableMapping[Role | str, str] | None = None,
    ) -> None:
        """Configure the writer with colour and style overrides."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=True if force_color else None, no_color=no_color)
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            role = _coerce_role(key)
            if role is not None:
                merged[role] = value
        self._styles: dict[Role, Style] = {role: Style.parse(value) for role, value in merged.items()}

    @property
    def console(self) -> Console:
        return self._console

    def to_text(self, text: StyledText | str) -> Text:
        """Convert ``text`` to a Rich :class:`Text`, nesting roles outermost first.

        Examples
        --------
        >>> from lib_report_rich.domain.styled import styled
        >>> rendered = RichLineWriter(console=Console()).to_text(styled("ok", Role.SUCCESS, Role.STRONG))
        >>> rendered.plain, rendered.spans[0].style.bold
        ('ok', True)
        """

        if isinstance(text, str):
            return Text(text)
        rendered = Text()
        for span in text.spans:
            styles = [self._styles[role] for role in span.roles if role in self._styles]
            rendered.append(span.text, style=Style.combine(styles) if styles else None)
        return rendered

    def write(self, text: StyledText | str, *, end: str = "\n", truncate: bool = False) -> None:
        """Print ``text``; ``truncate`` caps it at the console width minus the margin.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True, width=40)
        >>> RichLineWriter(console=console).write("hello")
        >>> console.export_text()
        'hello\\n'
        """

        rendered = self.to_text(text)
        if truncate:
            max_width = max(self._console.width - LINE_MARGIN, 1)
            if rendered.cell_len > max_width:
                rendered.truncate(max_width, overflow="ellipsis")
        self._console.print(rendered, end=end, soft_wrap=True, highlight=False)

    def clear_line(self) -> None:
        """Erase the current line and return the cursor to column 0."""
        self._console.control(Control(ControlType.CARRIAGE_RETURN, (ControlType.ERASE_IN_LINE, 2)))


__all__ = ["RichLineWriter"]
