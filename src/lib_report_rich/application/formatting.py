"""Formatting rules turning runner payloads into styled console lines.

Purpose
-------
Keep every layout decision of the reporter in pure functions so they can be
tested without a terminal, a timer or a runner.

Contents
--------
* :func:`build_line` - one task rendered as type/params or navigation name.
* :func:`build_begin_header`, :func:`build_suite_header` - run and suite
  headers.
* :func:`build_pending_frame`, :func:`build_pass_line`,
  :func:`build_fail_line` - task state lines.
* :func:`build_report_lines` - the final summary.

System Role
-----------
Called by :class:`lib_report_rich.application.reporter.Reporter`; output is a
:class:`StyledText` that the line writer maps to concrete styles.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from lib_report_rich.domain.report import Report
from lib_report_rich.domain.spinners import ELLIPSIS, INDENT, MAX_PARAM_LENGTH
from lib_report_rich.domain.styled import Role, StyledText, styled
from lib_report_rich.domain.suites import SuiteDefinition, suite_label, suite_name
from lib_report_rich.domain.tasks import TaskDescriptor, format_duration

CONFIGURATION_TYPE = "   - configuration"


def _js_numbers(value: Any) -> Any:
    """Return ``value`` with integral floats turned into ints, recursively.

    >>> _js_numbers({"w": 1280.0, "ratio": [1.5, 2.0]})
    {'w': 1280, 'ratio': [1.5, 2]}
    """

    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, Mapping):
        return {key: _js_numbers(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_js_numbers(item) for item in value]
    return value


def stringify_param(value: Any) -> str:
    """Return the display form of a parameter value.

    Containers and ``None`` become compact JSON, booleans use JSON spelling
    and integral floats drop their fractional part.

    Examples
    --------
    >>> stringify_param({"a": [1, 2]})
    '{"a":[1,2]}'
    >>> stringify_param(True), stringify_param(None), stringify_param(3)
    ('true', 'null', '3')
    >>> stringify_param(1.0), stringify_param({"x": 2.0}), stringify_param(0.5)
    ('1', '{"x":2}', '0.5')
    """

    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None or isinstance(value, (Mapping, list, tuple)):
        return json.dumps(_js_numbers(value), separators=(",", ":"), ensure_ascii=False, default=str)
    return str(_js_numbers(value))


def cap_param(text: str, limit: int = MAX_PARAM_LENGTH) -> str:
    """Cut ``text`` to ``limit - 4`` characters plus an ellipsis when longer than ``limit``.

    >>> cap_param("abcdefghijklmnopqrstuvwxyz")
    'abcdefghijklmnop...'
    >>> cap_param("short")
    'short'
    """

    if len(text) > limit:
        return text[: limit - 4] + ELLIPSIS
    return text


def _duration_suffix(task: TaskDescriptor) -> StyledText:
    if not task.duration:
        return StyledText()
    return styled(f" [{format_duration(task.duration)}] ", Role.STRONG, Role.DURATION)


def build_line(task: TaskDescriptor | Mapping[str, Any]) -> StyledText:
    """Render ``task`` as a single styled line.

    Examples
    --------
    >>> build_line({"type": "get", "params": {"url": "/home", "n": 2}}).plain
    'get  url : /home n : 2  '
    >>> build_line({"it": "home", "duration": 1234}).plain
    ' home   [1.23s] '
    """

    task = TaskDescriptor.from_payload(task)
    duration = _duration_suffix(task).wrap(Role.PANEL)

    if task.is_navigation:
        body = styled(" ") + styled(str(task.it), Role.VALUE) + " "
        return body.wrap(Role.PANEL) + " " + duration

    body = styled(" ")
    for key, value in task.params.items():
        body = (
            body
            + styled(str(key), Role.KEY, Role.STRONG)
            + styled(" : ", Role.STRONG)
            + styled(cap_param(stringify_param(value)), Role.VALUE)
            + " "
        )
    return styled(str(task.type or ""), Role.STRONG) + " " + body.wrap(Role.PANEL) + " " + duration


def join_names(names: Sequence[str]) -> str:
    """Join ``names`` with commas and a final ``and``.

    >>> join_names(["a.json", "b.json", "c.json"])
    'a.json, b.json and c.json'
    >>> join_names(["only"])
    'only'
    """

    if len(names) < 2:
        return ", ".join(names)
    return ", ".join(names[:-1]) + " and " + names[-1]


def build_begin_header(suites: Iterable[Any]) -> StyledText:
    """Render the run header naming every suite.

    >>> build_begin_header(["a.json", "b.json"]).plain
    '\\n begin 2 suites : a.json and b.json '
    """

    labels = [suite_label(ref) for ref in suites]
    plural = "s" if len(labels) > 1 else ""
    header = styled(f"\n begin {len(labels)} suite{plural} : ") + styled(join_names(labels), Role.SUITE) + " "
    return header.wrap(Role.INFO)


def build_suite_header(ref: Any, suite: SuiteDefinition | None) -> StyledText:
    """Render the header of the suite identified by ``ref``.

    Without a resolved ``suite`` only the name is shown.

    >>> build_suite_header("suites/login.json", None).plain
    '\\n    login '
    """

    header = styled("\n    ") + styled(suite_name(ref), Role.SUITE)
    if suite is not None:
        if suite.describe:
            header = header + styled(": ", Role.SUITE, Role.STRONG) + styled(suite.describe, Role.VALUE)
        count = suite.task_count
        plural = "s" if count > 1 else ""
        header = header + styled(f" ({count} task{plural}) ", Role.STRONG, Role.ALERT)
        configuration = TaskDescriptor(type=CONFIGURATION_TYPE, params=suite.extra_config())
        header = header + "\n " + build_line(configuration)
    return (header + " ").wrap(Role.INFO)


def build_pending_frame(glyph: str, line: StyledText) -> StyledText:
    """Render one spinner frame for a pending task."""
    return INDENT + (styled(f" [ {glyph} ] ", Role.STRONG) + line).wrap(Role.PENDING)


def build_pass_line(task: TaskDescriptor | Mapping[str, Any], error_count: int = 0) -> StyledText:
    """Render a passed task; a non-zero ``error_count`` turns it into a warning.

    >>> build_pass_line({"it": "home"}, 2).plain
    '     [ ! ]  home   2 error(s) '
    """

    line = build_line(task)
    if error_count:
        marked = (styled(" [ ! ] ", Role.STRONG) + line).wrap(Role.WARN)
        return INDENT + marked + styled(f" {error_count} error(s) ", Role.BADGE)
    return INDENT + (styled(" [ √ ] ", Role.STRONG) + line).wrap(Role.SUCCESS)


def build_fail_line(task: TaskDescriptor | Mapping[str, Any], err: Any = None) -> StyledText:
    """Render a failed task with ``err`` inline when provided.

    >>> build_fail_line({"it": "home"}, "timeout").plain
    '     [ x ]  home    timeout  '
    """

    body = styled(" [ x ] ", Role.STRONG) + build_line(task) + " "
    if err:
        body = body + styled(f" {err} ", Role.BADGE) + " "
    return INDENT + body.wrap(Role.ERROR)


def format_details(details: Any) -> str:
    """Pretty-print error details as tab-indented JSON.

    >>> format_details({"code": 500}).splitlines()[1]
    '\\t"code": 500'
    """

    return json.dumps(details, indent="\t", ensure_ascii=False, default=str)


def build_report_lines(report: Report | Mapping[str, Any]) -> list[StyledText]:
    """Render the final summary as a list of lines.

    The ``Errors`` section only appears when at least one error group exists.

    >>> [line.plain for line in build_report_lines({"timing": {"total": 2500}, "errors": {"byError": {}}})]
    ['\\n Report ', '- Ran for : 2.50s ']
    """

    report = Report.from_payload(report)
    timing = report.timing
    lines = [
        styled("\n Report ", Role.STRONG).wrap(Role.INFO),
        (styled("- Ran for : ") + styled(format_duration(timing.total) + " ", Role.STRONG)).wrap(Role.INFO),
    ]

    slowest = timing.slowest
    if slowest is not None:
        detail = styled(slowest.name + " ", Role.STRONG)
        if slowest.duration is not None:
            detail = detail + styled(format_duration(slowest.duration) + " ", Role.STRONG, Role.ALERT)
        lines.append((styled("- Slowest : ") + detail).wrap(Role.INFO))

    if timing.above:
        lines.append(styled("- Above median : ", Role.INFO))
        lines.extend(styled(f"    - {test.name} ", Role.INFO) for test in timing.above)

    if not report.errors:
        return lines

    lines.append("\n" + styled("- Errors : ", Role.ERROR))
    for group in report.errors:
        title = styled("    - [") + styled(group.error.type, Role.STRONG) + f"] {group.key} : "
        lines.append(title.wrap(Role.WARN, Role.ALERT))
        lines.extend(styled(f"        - {test.name} ", Role.INFO) for test in group.tests)
        lines.append(styled(format_details(group.error.details), Role.MUTED) + "\n")
    return lines


__all__ = [
    "CONFIGURATION_TYPE",
    "build_begin_header",
    "build_fail_line",
    "build_line",
    "build_pass_line",
    "build_pending_frame",
    "build_report_lines",
    "build_suite_header",
    "cap_param",
    "format_details",
    "join_names",
    "stringify_param",
]
