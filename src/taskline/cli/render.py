# src/taskline/cli/render.py

"""Turn dispatch outcomes and command errors into printable blocks."""

from __future__ import annotations

from ..core.errors import TaskCommandError, UnknownCommandError
from ..tasks.task_list import TaskList
from ..tasks.task_models import DEFAULT_DATE_FORMAT
from .commands import CommandKind, Outcome, registry

RULE = "_" * 55


def _frame(lines: list[str]) -> str:
    return "\n".join([RULE, *lines, RULE])


def welcome_message(app_name: str) -> str:
    return _frame([f"Hello! This is {app_name}.", "What can I do for you?"])


def render_outcome(
    outcome: Outcome,
    tasks: TaskList,
    *,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> str:
    kind = outcome.kind

    if kind is CommandKind.LIST:
        return _frame([tasks.summary_line(), *tasks.render(date_format)])

    if kind is CommandKind.EXIT:
        return _frame(["Bye! See you soon!"])

    if outcome.task is None:
        raise ValueError(f"Outcome {kind} carries no task")
    shown = outcome.task.describe(date_format)

    if kind is CommandKind.MARK:
        return _frame(["Nice! One task down!", f"  {shown}"])
    if kind is CommandKind.UNMARK:
        return _frame(["One more task to do.", f"  {shown}"])
    if kind is CommandKind.DELETE:
        return _frame(["Deleted one task:", f"  {shown}", tasks.summary_line()])

    return _frame(["Added one task:", f"  {shown}", tasks.summary_line()])


def render_error(err: TaskCommandError) -> str:
    lines = [f"OOPS: {err.message}"]
    if isinstance(err, UnknownCommandError):
        lines.append(registry.build_help())
    return _frame(lines)
