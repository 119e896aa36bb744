from __future__ import annotations

from lib_report_rich.adapters.events import EventEmitter


def test_handlers_run_in_registration_order() -> None:
    calls: list[str] = []
    emitter = EventEmitter()
    emitter.on("pass", lambda task: calls.append(f"first:{task}")).on("pass", lambda task: calls.append(f"second:{task}"))

    assert emitter.emit("pass", "t1") is True
    assert calls == ["first:t1", "second:t1"]


def test_emit_forwards_all_arguments() -> None:
    received: list[tuple] = []
    emitter = EventEmitter()
    emitter.on("fail", lambda *args: received.append(args))

    emitter.emit("fail", "task", "err")

    assert received == [("task", "err")]


def test_off_removes_handler() -> None:
    calls: list[str] = []
    emitter = EventEmitter()
    handler = calls.append
    emitter.on("error", handler)
    emitter.off("error", handler)
    emitter.off("missing", handler)

    assert emitter.emit("error", "E1") is False
    assert calls == []
    assert emitter.listeners("error") == ()
