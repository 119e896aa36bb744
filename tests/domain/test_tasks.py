from __future__ import annotations

from types import SimpleNamespace

import pytest

from lib_report_rich.domain.tasks import TaskDescriptor, format_duration


@pytest.mark.parametrize(
    "milliseconds, expected",
    [(1234, "1.23s"), (500, "0.50s"), (0, "0.00s"), (61000, "61.00s")],
)
def test_format_duration_uses_two_decimals(milliseconds: float, expected: str) -> None:
    assert format_duration(milliseconds) == expected


def test_from_payload_keeps_param_insertion_order() -> None:
    task = TaskDescriptor.from_payload({"type": "get", "params": {"z": 1, "a": 2, "m": 3}})

    assert list(task.params) == ["z", "a", "m"]
    assert task.is_navigation is False
    assert task.name == "get"


def test_from_payload_accepts_attribute_objects() -> None:
    task = TaskDescriptor.from_payload(SimpleNamespace(it="home", duration=120))

    assert task.is_navigation is True
    assert task.it == "home"
    assert task.duration == 120
    assert dict(task.params) == {}


def test_from_payload_returns_descriptors_unchanged() -> None:
    task = TaskDescriptor(type="get")
    assert TaskDescriptor.from_payload(task) is task


def test_from_payload_rejects_non_mapping_params() -> None:
    with pytest.raises(ValueError, match="params must be a mapping"):
        TaskDescriptor.from_payload({"type": "get", "params": ["a"]})


def test_params_are_read_only_copies() -> None:
    source = {"a": 1}
    task = TaskDescriptor(type="get", params=source)
    source["b"] = 2

    assert dict(task.params) == {"a": 1}
    with pytest.raises(TypeError):
        task.params["c"] = 3  # type: ignore[index]


def test_with_duration_copies_the_task() -> None:
    task = TaskDescriptor(it="home")
    timed = task.with_duration(900)

    assert timed.duration == 900
    assert task.duration is None
