"""Configuration for todo."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel

from todo.errors import TodoError

DATA_DIR_NAME = ".todo"
TASKS_FILENAME = "tasks.json"
DATA_DIR_ENV = "TODO_DATA_DIR"


class TodoConfig(BaseModel):
    """Where the task list lives."""

    data_dir: Path

    @property
    def tasks_file(self) -> Path:
        return self.data_dir / TASKS_FILENAME

    @classmethod
    def resolve(cls, data_dir: str | Path | None = None) -> TodoConfig:
        """Resolve the data directory.

        Precedence: explicit argument, then $TODO_DATA_DIR, then ~/.todo.
        """
        if data_dir is None:
            data_dir = os.environ.get(DATA_DIR_ENV) or None

        if data_dir is None:
            try:
                home = Path.home()
            except RuntimeError as e:
                raise TodoError("Could not find home directory") from e
            data_dir = home / DATA_DIR_NAME

        return cls(data_dir=Path(data_dir).expanduser())
