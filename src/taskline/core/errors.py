# src/taskline/core/errors.py

"""
Typed command errors.

Every failure is raised at the point of detection as a fresh instance.
The console loop catches TaskCommandError, renders str(err) and keeps going.
"""

from __future__ import annotations


class TaskCommandError(Exception):
    """Base class for all user-facing command failures."""

    default_message = "Invalid command."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class WrongArityError(TaskCommandError):
    def __init__(self, keyword: str, usage: str | None = None) -> None:
        msg = f"Wrong command format for '{keyword}'."
        if usage:
            msg += f" Usage: {usage}"
        super().__init__(msg)
        self.keyword = keyword
        self.usage = usage


class NonNumericIndexError(TaskCommandError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Parameter is not a numerical value: {token!r}.")
        self.token = token


class MissingMarkerError(TaskCommandError):
    def __init__(self, expected: str, got: str | None = None) -> None:
        msg = f"Missing special param {expected}"
        if got is not None:
            msg += f" (got {got!r})"
        super().__init__(msg + ".")
        self.expected = expected
        self.got = got


class EmptyParameterError(TaskCommandError):
    default_message = "Empty parameter inserted."


class IndexOutOfRangeError(TaskCommandError):
    def __init__(self, index: int, size: int) -> None:
        # index is zero-based; users see position index + 1
        if size == 0:
            msg = f"There is no task {index + 1}: the list is empty."
        else:
            msg = f"There is no task {index + 1}: pick a number from 1 to {size}."
        super().__init__(msg)
        self.index = index
        self.size = size


class InvalidDateError(TaskCommandError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid date input/format {token!r}. [Format: yyyy-mm-dd]")
        self.token = token


class UnknownCommandError(TaskCommandError):
    def __init__(self, keyword: str) -> None:
        if keyword:
            msg = f"Unknown command: {keyword}."
        else:
            msg = "Empty command."
        super().__init__(msg)
        self.keyword = keyword


class CorruptRecordError(TaskCommandError):
    """A persisted task line could not be decoded."""

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"Corrupt task record ({reason}): {line!r}")
        self.line = line
        self.reason = reason
