# src/taskline/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the task file store and the loaded task list into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskFileStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings(). With save_tasks off the
    session starts empty and nothing is written.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if not settings.save_tasks:
        logger.info("Task persistence disabled; starting with an empty list.")
        return AppState(settings=settings, tasks=TaskList())

    store = TaskFileStore(settings.tasks_path)
    return AppState(settings=settings, tasks=store.load(), store=store)


def save_tasks(state: AppState) -> None:
    """
    Write the task list if persistence is on and something changed.

    Errors are logged, not raised; the state stays dirty so a later call retries.
    """
    if state.store is None or not state.dirty:
        return
    try:
        state.store.save(state.tasks)
        state.dirty = False
    except OSError:
        logger.exception("Failed to save tasks to %s", state.store.path)
