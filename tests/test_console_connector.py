# tests/test_console_connector.py

from __future__ import annotations

import pytest

from taskline.cli.bootstrap import create_initial_state, save_tasks
from taskline.connectors.console_connector import run_console_loop
from taskline.core.state import AppState

from .fakes import ScriptedInput


def _run(state: AppState, lines: list[str], monkeypatch: pytest.MonkeyPatch) -> ScriptedInput:
    fake = ScriptedInput(lines)
    monkeypatch.setattr("builtins.input", fake)
    run_console_loop(state)
    return fake


def test_session_runs_until_bye_and_saves(
    state: AppState, settings, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    fake = _run(
        state,
        ["todo read", "", "mark 1", "oops", "mark abc", "list", "bye", "todo never"],
        monkeypatch,
    )
    out = capsys.readouterr().out

    assert "Added one task:" in out
    assert "Nice! One task down!" in out
    assert "OOPS: Unknown command: oops." in out
    assert "OOPS: Parameter is not a numerical value: 'abc'." in out
    assert "1. [T][X] read" in out
    assert "Bye! See you soon!" in out

    assert fake.lines == ["todo never"]
    assert len(state.tasks) == 1
    assert settings.tasks_path.read_text("utf-8") == "T | 1 | read\n"


def test_eof_ends_session(
    state: AppState, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _run(state, ["todo read"], monkeypatch)

    assert len(state.tasks) == 1
    assert "Bye!" not in capsys.readouterr().out


def test_errors_do_not_write_file(state: AppState, settings, monkeypatch: pytest.MonkeyPatch) -> None:
    _run(state, ["list extra", "delete 1", "event trip /from mon to fri"], monkeypatch)

    assert len(state.tasks) == 0
    assert not settings.tasks_path.exists()


def test_without_store_nothing_is_saved(settings, monkeypatch: pytest.MonkeyPatch) -> None:
    state = AppState(settings=settings)
    _run(state, ["todo read", "bye"], monkeypatch)

    assert len(state.tasks) == 1
    assert not settings.tasks_path.exists()


def test_read_only_session_leaves_file_untouched(settings, monkeypatch: pytest.MonkeyPatch) -> None:
    original = "T | 0 | a\nZ | 0 | future-kind\n"
    settings.tasks_path.parent.mkdir(parents=True)
    settings.tasks_path.write_text(original, "utf-8")
    state = create_initial_state(settings=settings)

    _run(state, ["list", "mark abc", "bye"], monkeypatch)
    save_tasks(state)

    assert state.dirty is False
    assert settings.tasks_path.read_text("utf-8") == original
    assert state.store is not None
    assert not state.store.backup_path.exists()


def test_change_after_skipped_lines_backs_up_original(settings, monkeypatch: pytest.MonkeyPatch) -> None:
    original = "T | 0 | a\nZ | 0 | future-kind\n"
    settings.tasks_path.parent.mkdir(parents=True)
    settings.tasks_path.write_text(original, "utf-8")
    state = create_initial_state(settings=settings)

    _run(state, ["mark 1", "bye"], monkeypatch)

    assert state.dirty is False
    assert settings.tasks_path.read_text("utf-8") == "T | 1 | a\n"
    assert state.store is not None
    assert state.store.backup_path.read_text("utf-8") == original
