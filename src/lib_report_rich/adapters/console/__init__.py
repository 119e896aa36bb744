"""Console adapters."""

from __future__ import annotations

from .rich_console import RichLineWriter

__all__ = ["RichLineWriter"]
