"""Exceptions raised by todo.

Only storage problems are errors. A task id that matches nothing is a
normal outcome and never raises.
"""

from __future__ import annotations

from pathlib import Path


class TodoError(Exception):
    """Base class for fatal todo errors."""


class StorageError(TodoError):
    """The tasks file or its directory could not be accessed."""

    def __init__(self, path: Path, operation: str, reason: str) -> None:
        self.path = path
        self.operation = operation
        self.reason = reason
        super().__init__(f"Could not {operation} {path}: {reason}")


class TaskParseError(StorageError):
    """The tasks file exists but does not hold a valid task list."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(path, "parse", reason)
