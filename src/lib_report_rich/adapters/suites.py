"""JSON file adapter implementing :class:`SuiteLookup`."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Mapping

from lib_report_rich.application.ports.suites import SuiteLookup
from lib_report_rich.domain.suites import SuiteDefinition


class JsonSuiteLookup(SuiteLookup):
    """Load suite definitions from JSON files.

    Relative references resolve against ``base_dir`` (the working directory by
    default); a reference without suffix falls back to ``<ref>.json``. Read and
    decode errors propagate so the reporter can treat the suite as
    "no detail available".

    Examples
    --------
    >>> import tempfile
    >>> folder = Path(tempfile.mkdtemp())
    >>> _ = (folder / "login.json").write_text('{"config": {"describe": "Login"}, "tasks": [{}]}')
    >>> JsonSuiteLookup(folder)("login").describe
    'Login'
    """

    def __init__(self, base_dir: str | os.PathLike[str] | None = None, *, encoding: str = "utf-8") -> None:
        self._base_dir = Path(base_dir) if base_dir is not None else None
        self._encoding = encoding

    def resolve(self, ref: Any) -> Path:
        """Return the file path referenced by ``ref``."""
        if isinstance(ref, Mapping):
            ref = ref.get("path") or ref.get("name")
        elif not isinstance(ref, (str, os.PathLike)):
            ref = getattr(ref, "path", None) or getattr(ref, "name", None)
        if ref is None:
            raise ValueError("suite reference does not name a file")
        path = Path(ref)
        if not path.is_absolute() and self._base_dir is not None:
            path = self._base_dir / path
        if not path.exists() and path.suffix != ".json":
            candidate = path.with_name(path.name + ".json")
            if candidate.exists():
                return candidate
        return path

    def __call__(self, ref: Any) -> SuiteDefinition:
        path = self.resolve(ref)
        payload = json.loads(path.read_text(encoding=self._encoding))
        return SuiteDefinition.from_payload(payload)


__all__ = ["JsonSuiteLookup"]
