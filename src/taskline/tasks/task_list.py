# src/taskline/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ..core.errors import IndexOutOfRangeError
from .task_models import DEFAULT_DATE_FORMAT, Task

logger = logging.getLogger(__name__)


class TaskList:
    """
    Ordered, mutable collection of task records.

    Indices are zero-based here; the parser converts the 1-based numbers users
    type. Negative indices are rejected rather than counted from the end.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise IndexOutOfRangeError(index, len(self._tasks))

    def size(self) -> int:
        return len(self._tasks)

    def append(self, task: Task) -> Task:
        self._tasks.append(task)
        logger.debug("Task appended pos=%d kind=%s", len(self._tasks), task.kind)
        return task

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def set_done(self, index: int, value: bool) -> Task:
        """Replace the record at index with a copy whose done flag is value."""
        self._check_index(index)
        updated = self._tasks[index].with_done(value)
        self._tasks[index] = updated
        return updated

    def delete(self, index: int) -> Task:
        self._check_index(index)
        removed = self._tasks.pop(index)
        logger.debug("Task deleted pos=%d remaining=%d", index + 1, len(self._tasks))
        return removed

    def summary_line(self) -> str:
        n = len(self._tasks)
        noun = "task" if n == 1 else "tasks"
        return f"You have {n} {noun} in the list."

    def render(self, date_format: str = DEFAULT_DATE_FORMAT) -> list[str]:
        return [f"{i}. {t.describe(date_format)}" for i, t in enumerate(self._tasks, start=1)]
