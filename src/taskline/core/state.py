# src/taskline/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskFileStore


@dataclass(slots=True)
class AppState:
    """
    Everything one session needs.

    `settings` is typed loosely so tests can pass a SimpleNamespace.
    `store` is None when persistence is turned off. `dirty` is set by a
    command that changed the list and cleared once the list is saved.
    """

    settings: Any
    tasks: TaskList = field(default_factory=TaskList)
    store: TaskFileStore | None = None
    dirty: bool = False

    @property
    def date_format(self) -> str:
        return str(getattr(self.settings, "date_format", "%Y-%m-%d"))
