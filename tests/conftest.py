# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskline.cli.bootstrap import create_initial_state
from taskline.core.state import AppState
from taskline.tasks.task_list import TaskList


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    A SimpleNamespace rather than the real config keeps tests independent of
    the environment and of any local .env file.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="taskline",
        log_level="WARNING",
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.txt",
        save_tasks=True,
        date_format="%Y-%m-%d",
    )


@pytest.fixture()
def tasks() -> TaskList:
    return TaskList()


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return create_initial_state(settings=settings)
