# tests/test_task_list.py

from __future__ import annotations

import pytest

from taskline.core.errors import IndexOutOfRangeError
from taskline.tasks.task_list import TaskList
from taskline.tasks.task_models import Event, Todo


def test_append_get_and_size(tasks: TaskList) -> None:
    tasks.append(Todo("a"))
    tasks.append(Todo("b"))

    assert tasks.size() == 2
    assert len(tasks) == 2
    assert tasks.get(1).name == "b"


def test_out_of_range_is_never_clamped(tasks: TaskList) -> None:
    tasks.append(Todo("a"))

    for bad in (-1, 1, 5):
        with pytest.raises(IndexOutOfRangeError) as exc:
            tasks.get(bad)
        assert exc.value.size == 1
    with pytest.raises(IndexOutOfRangeError):
        tasks.set_done(1, True)
    with pytest.raises(IndexOutOfRangeError):
        tasks.delete(-1)
    assert len(tasks) == 1


def test_set_done_replaces_record_in_place(tasks: TaskList) -> None:
    tasks.append(Todo("a"))
    tasks.append(Todo("b"))

    before = tasks.get(0)
    after = tasks.set_done(0, True)

    assert after is tasks.get(0)
    assert before.done is False
    assert [t.name for t in tasks] == ["a", "b"]


def test_delete_returns_removed_and_shifts(tasks: TaskList) -> None:
    for name in ("a", "b", "c"):
        tasks.append(Todo(name))

    removed = tasks.delete(0)

    assert removed.name == "a"
    assert [t.name for t in tasks] == ["b", "c"]


def test_summary_line_counts() -> None:
    assert TaskList().summary_line() == "You have 0 tasks in the list."
    assert TaskList([Todo("a")]).summary_line() == "You have 1 task in the list."
    assert TaskList([Todo("a"), Todo("b")]).summary_line() == "You have 2 tasks in the list."


def test_render_is_one_based() -> None:
    tasks = TaskList([Todo("a"), Event("trip", "mon", "fri", done=True)])
    assert tasks.render() == [
        "1. [T][ ] a",
        "2. [E][X] trip (from: mon to: fri)",
    ]
