# src/taskline/tasks/task_store.py

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from ..core.errors import CorruptRecordError, TaskCommandError
from .task_list import TaskList
from .task_models import Deadline, Event, Task, TaskKind, Todo

logger = logging.getLogger(__name__)

SEP = " | "

# Number of fields per type tag: tag, done flag, name, extras...
_FIELD_COUNTS: dict[TaskKind, int] = {
    TaskKind.TODO: 3,
    TaskKind.DEADLINE: 4,
    TaskKind.EVENT: 5,
}


def encode_task(task: Task) -> str:
    """Serialize a task as `<tag> | <0/1> | <name> | <extras...>`."""
    fields = [task.kind.value, "1" if task.done else "0", task.name, *task.extra_fields()]
    return SEP.join(fields)


def decode_task(line: str) -> Task:
    raw = line.rstrip("\r\n")
    parts = raw.split(SEP)

    try:
        kind = TaskKind(parts[0].strip())
    except ValueError as e:
        raise CorruptRecordError(raw, "unknown type tag") from e

    if len(parts) != _FIELD_COUNTS[kind]:
        raise CorruptRecordError(raw, f"expected {_FIELD_COUNTS[kind]} fields, got {len(parts)}")

    flag = parts[1].strip()
    if flag not in ("0", "1"):
        raise CorruptRecordError(raw, "done flag must be 0 or 1")
    done = flag == "1"
    name = parts[2]

    try:
        if kind is TaskKind.TODO:
            return Todo(name, done=done)
        if kind is TaskKind.DEADLINE:
            return Deadline.from_text(name, parts[3].strip(), done=done)
        return Event(name, parts[3], parts[4], done=done)
    except TaskCommandError as e:
        raise CorruptRecordError(raw, e.message) from e


def _decode_line(raw_line: bytes) -> str:
    try:
        return raw_line.decode("utf-8")
    except UnicodeDecodeError as e:
        raise CorruptRecordError(raw_line.decode("utf-8", "replace"), "not valid UTF-8") from e


class TaskFileStore:
    """
    Plain-text task file, one pipe-delimited record per line.

    Loading is best-effort: undecodable lines (bad fields or bad UTF-8) are
    logged and skipped so one bad line never loses the rest of the list. If any
    line was skipped, the first save copies the original file to `<name>.bak`
    before replacing it, so skipped records can still be recovered by hand.
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)
        self._backup_pending = False

    @property
    def path(self) -> Path:
        return self._path

    @property
    def backup_path(self) -> Path:
        return self._path.with_suffix(self._path.suffix + ".bak")

    def load(self) -> TaskList:
        if not self._path.exists():
            logger.info("No task file at %s, starting with an empty list.", self._path)
            return TaskList()

        tasks = TaskList()
        skipped = 0
        raw = self._path.read_bytes()
        for lineno, raw_line in enumerate(raw.splitlines(), start=1):
            if not raw_line.strip():
                continue
            try:
                tasks.append(decode_task(_decode_line(raw_line)))
            except CorruptRecordError as e:
                skipped += 1
                logger.warning("Skipping %s:%d: %s", self._path, lineno, e)

        self._backup_pending = skipped > 0
        logger.info("Loaded %d tasks from %s (skipped=%d)", len(tasks), self._path, skipped)
        return tasks

    def save(self, tasks: TaskList) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        body = "".join(encode_task(t) + "\n" for t in tasks)
        if self._backup_pending and self._path.exists():
            shutil.copyfile(self._path, self.backup_path)
            logger.warning("Kept original task file with skipped lines at %s", self.backup_path)
        self._backup_pending = False

        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(body, "utf-8")
        os.replace(tmp, self._path)
        logger.info("Saved %d tasks to %s", len(tasks), self._path)
