"""Domain value objects used by the reporting pipeline."""

from __future__ import annotations

from .report import ErrorGroup, ErrorInfo, Report, Timing
from .styled import Role, Span, StyledText, styled
from .suites import SuiteDefinition, suite_label, suite_name
from .tasks import TaskDescriptor, format_duration

__all__ = [
    "ErrorGroup",
    "ErrorInfo",
    "Report",
    "Role",
    "Span",
    "StyledText",
    "SuiteDefinition",
    "TaskDescriptor",
    "Timing",
    "format_duration",
    "styled",
    "suite_label",
    "suite_name",
]
