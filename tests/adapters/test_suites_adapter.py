from __future__ import annotations

import json
from pathlib import Path
from types import SimpleNamespace

import pytest

from lib_report_rich.adapters.suites import JsonSuiteLookup


@pytest.fixture
def suite_dir(tmp_path: Path) -> Path:
    (tmp_path / "login.json").write_text(
        json.dumps({"config": {"describe": "Sign in", "url": "/", "retries": 2}, "tasks": [{"type": "fill"}]}),
        encoding="utf-8",
    )
    (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
    (tmp_path / "shapeless.json").write_text(json.dumps({"tasks": []}), encoding="utf-8")
    return tmp_path


def test_lookup_reads_relative_references(suite_dir: Path) -> None:
    suite = JsonSuiteLookup(suite_dir)("login.json")

    assert suite.describe == "Sign in"
    assert suite.task_count == 2


def test_lookup_appends_json_suffix(suite_dir: Path) -> None:
    assert JsonSuiteLookup(suite_dir)("login").describe == "Sign in"


def test_lookup_accepts_absolute_paths_and_named_objects(suite_dir: Path) -> None:
    lookup = JsonSuiteLookup()

    assert lookup(suite_dir / "login.json").describe == "Sign in"
    assert lookup(SimpleNamespace(name=str(suite_dir / "login.json"))).describe == "Sign in"
    assert lookup({"path": str(suite_dir / "login.json")}).describe == "Sign in"


def test_lookup_propagates_missing_files(suite_dir: Path) -> None:
    with pytest.raises(FileNotFoundError):
        JsonSuiteLookup(suite_dir)("absent.json")


def test_lookup_propagates_decode_errors(suite_dir: Path) -> None:
    with pytest.raises(json.JSONDecodeError):
        JsonSuiteLookup(suite_dir)("broken.json")


def test_lookup_propagates_shape_errors(suite_dir: Path) -> None:
    with pytest.raises(ValueError, match="config"):
        JsonSuiteLookup(suite_dir)("shapeless.json")


def test_lookup_rejects_references_without_a_name() -> None:
    with pytest.raises(ValueError, match="does not name a file"):
        JsonSuiteLookup()(SimpleNamespace())
