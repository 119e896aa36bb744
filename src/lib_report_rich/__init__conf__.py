"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

from typing import Callable

name = "lib_report_rich"
title = "Rich console reporter for test-runner lifecycle events"
version = "0.1.0"
homepage = "https://github.com/bitranox/lib_report_rich"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_report_rich"


def print_info(writer: Callable[[str], object] | None = None) -> None:
    """Write the metadata banner through ``writer`` (defaults to ``print``).

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_report_rich:\\n'
    """

    emit = writer if writer is not None else (lambda text: print(text, end=""))
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    emit(f"Info for {name}:\n")
    emit("\n")
    for label, value in fields:
        emit(f"    {label:<{pad}} = {value}\n")
