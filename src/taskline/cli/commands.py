# src/taskline/cli/commands.py

"""
Command parsing and dispatch.

A line is split on whitespace; the first token picks a handler from a fixed
registry and the remaining tokens are validated by that handler. Handlers
check everything before touching the task list, so a failed command never
leaves a partial mutation behind.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from ..core.errors import (
    EmptyParameterError,
    MissingMarkerError,
    NonNumericIndexError,
    UnknownCommandError,
    WrongArityError,
)
from ..tasks.task_list import TaskList
from ..tasks.task_models import Deadline, Event, Task, Todo

logger = logging.getLogger(__name__)

BY_MARKER = "/by"
FROM_MARKER = "/from"
TO_MARKER = "/to"


class CommandKind(StrEnum):
    LIST = "list"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    ADD_PLAIN = "add-plain"
    ADD_DEADLINE = "add-deadline"
    ADD_SPAN = "add-span"
    EXIT = "exit"

    @property
    def mutates(self) -> bool:
        return self not in (CommandKind.LIST, CommandKind.EXIT)


@dataclass(frozen=True, slots=True)
class Outcome:
    """
    Result of one dispatched command.

    `task` is the record as it stood right after the command ran (the removed
    record for delete). Records are immutable, so later commands never change
    what an outcome shows.
    """

    kind: CommandKind
    task: Task | None = None


CommandHandler = Callable[[TaskList, list[str]], Outcome]


@dataclass(frozen=True, slots=True)
class CommandSpec:
    name: str
    handler: CommandHandler
    usage: str
    help_text: str


class CommandRegistry:
    """Keyword -> handler table used by the console loop."""

    def __init__(self) -> None:
        self._commands: dict[str, CommandSpec] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        *,
        usage: str,
        help_text: str,
    ) -> None:
        key = name.lower()
        self._commands[key] = CommandSpec(key, handler, usage, help_text)

    def names(self) -> list[str]:
        return list(self._commands)

    def usage(self, name: str) -> str | None:
        spec = self._commands.get(name.lower())
        return spec.usage if spec else None

    def dispatch(self, line: str, tasks: TaskList) -> Outcome:
        """
        Run one command line against `tasks`.

        Raises a TaskCommandError subclass instead of returning a partial result.
        """
        tokens = line.split()
        if not tokens:
            raise UnknownCommandError("")

        name = tokens[0].lower()
        spec = self._commands.get(name)
        if spec is None:
            raise UnknownCommandError(tokens[0])

        outcome = spec.handler(tasks, tokens)
        logger.debug("Dispatched %s -> %s (size=%d)", name, outcome.kind, len(tasks))
        return outcome

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for spec in self._commands.values():
            lines.append(f"  {spec.usage} - {spec.help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def dispatch(line: str, tasks: TaskList) -> Outcome:
    return registry.dispatch(line, tasks)


def _require_arity(tokens: list[str], count: int) -> None:
    if len(tokens) != count:
        keyword = tokens[0].lower()
        raise WrongArityError(keyword, registry.usage(keyword))


def _parse_index(token: str) -> int:
    """Convert a 1-based position token into a zero-based index."""
    try:
        value = int(token)
    except ValueError as e:
        raise NonNumericIndexError(token) from e
    return value - 1


def _require_marker(tokens: list[str], pos: int, marker: str) -> None:
    if tokens[pos] != marker:
        raise MissingMarkerError(marker, tokens[pos])


def cmd_list(tasks: TaskList, tokens: list[str]) -> Outcome:
    _require_arity(tokens, 1)
    return Outcome(CommandKind.LIST)


def cmd_mark(tasks: TaskList, tokens: list[str]) -> Outcome:
    _require_arity(tokens, 2)
    index = _parse_index(tokens[1])
    return Outcome(CommandKind.MARK, tasks.set_done(index, True))


def cmd_unmark(tasks: TaskList, tokens: list[str]) -> Outcome:
    _require_arity(tokens, 2)
    index = _parse_index(tokens[1])
    return Outcome(CommandKind.UNMARK, tasks.set_done(index, False))


def cmd_delete(tasks: TaskList, tokens: list[str]) -> Outcome:
    _require_arity(tokens, 2)
    index = _parse_index(tokens[1])
    return Outcome(CommandKind.DELETE, tasks.delete(index))


def cmd_bye(tasks: TaskList, tokens: list[str]) -> Outcome:
    _require_arity(tokens, 1)
    return Outcome(CommandKind.EXIT)


def cmd_todo(tasks: TaskList, tokens: list[str]) -> Outcome:
    """
    todo <name>

    Only the first token after the keyword becomes the name; anything after
    it is ignored.
    """
    if len(tokens) < 2:
        raise EmptyParameterError(f"Empty parameter inserted. Usage: {registry.usage('todo')}")
    task = Todo(tokens[1])
    return Outcome(CommandKind.ADD_PLAIN, tasks.append(task))


def cmd_deadline(tasks: TaskList, tokens: list[str]) -> Outcome:
    _require_arity(tokens, 4)
    _require_marker(tokens, 2, BY_MARKER)
    task = Deadline.from_text(tokens[1], tokens[3])
    return Outcome(CommandKind.ADD_DEADLINE, tasks.append(task))


def cmd_event(tasks: TaskList, tokens: list[str]) -> Outcome:
    _require_arity(tokens, 6)
    _require_marker(tokens, 2, FROM_MARKER)
    _require_marker(tokens, 4, TO_MARKER)
    task = Event(tokens[1], tokens[3], tokens[5])
    return Outcome(CommandKind.ADD_SPAN, tasks.append(task))


registry.register("list", cmd_list, usage="list", help_text="Show all tasks.")
registry.register("mark", cmd_mark, usage="mark <n>", help_text="Mark task n as done.")
registry.register("unmark", cmd_unmark, usage="unmark <n>", help_text="Mark task n as not done.")
registry.register("delete", cmd_delete, usage="delete <n>", help_text="Remove task n.")
registry.register("bye", cmd_bye, usage="bye", help_text="Save and quit.")
registry.register("todo", cmd_todo, usage="todo <name>", help_text="Add a plain task.")
registry.register(
    "deadline",
    cmd_deadline,
    usage="deadline <name> /by <yyyy-mm-dd>",
    help_text="Add a task with a due date.",
)
registry.register(
    "event",
    cmd_event,
    usage="event <name> /from <start> /to <end>",
    help_text="Add a task spanning start to end.",
)
