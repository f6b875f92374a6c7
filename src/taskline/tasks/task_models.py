# src/taskline/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from datetime import date
from enum import StrEnum

from ..core.errors import EmptyParameterError, InvalidDateError

DATE_INPUT_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
DEFAULT_DATE_FORMAT = "%Y-%m-%d"


class TaskKind(StrEnum):
    """Type tag shown in listings and written as the first persisted field."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


def parse_date(token: str) -> date:
    """Parse a strict YYYY-MM-DD calendar date."""
    if not DATE_INPUT_RE.match(token):
        raise InvalidDateError(token)
    try:
        return date.fromisoformat(token)
    except ValueError as e:
        raise InvalidDateError(token) from e


@dataclass(frozen=True, slots=True)
class Task:
    """
    Immutable task record.

    Marking a task produces a new record (see with_done); whoever holds an
    older record keeps seeing the state it was created with.
    """

    name: str
    done: bool = field(default=False, kw_only=True)

    kind = TaskKind.TODO

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise EmptyParameterError("Task name must not be empty.")

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    def with_done(self, value: bool) -> Task:
        return replace(self, done=value)

    def details(self, date_format: str = DEFAULT_DATE_FORMAT) -> str:
        return ""

    def extra_fields(self) -> tuple[str, ...]:
        """Type-specific fields in persisted order."""
        return ()

    def describe(self, date_format: str = DEFAULT_DATE_FORMAT) -> str:
        text = f"[{self.kind}][{self.status_icon}] {self.name}"
        extra = self.details(date_format)
        return f"{text} ({extra})" if extra else text

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True, slots=True)
class Todo(Task):
    kind = TaskKind.TODO


@dataclass(frozen=True, slots=True)
class Deadline(Task):
    by: date

    kind = TaskKind.DEADLINE

    @classmethod
    def from_text(cls, name: str, by: str, *, done: bool = False) -> Deadline:
        return cls(name, parse_date(by), done=done)

    def details(self, date_format: str = DEFAULT_DATE_FORMAT) -> str:
        return f"by: {self.by.strftime(date_format)}"

    def extra_fields(self) -> tuple[str, ...]:
        return (self.by.isoformat(),)


@dataclass(frozen=True, slots=True)
class Event(Task):
    start: str
    end: str

    kind = TaskKind.EVENT

    def __post_init__(self) -> None:
        Task.__post_init__(self)
        if not self.start.strip() or not self.end.strip():
            raise EmptyParameterError("Event start and end must not be empty.")

    def details(self, date_format: str = DEFAULT_DATE_FORMAT) -> str:
        return f"from: {self.start} to: {self.end}"

    def extra_fields(self) -> tuple[str, ...]:
        return (self.start, self.end)
