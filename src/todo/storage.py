"""Persistence for the task list.

The whole list lives in one pretty-printed JSON array. It is read once at
the start of a command and, if the command changed anything, written back
in full.

Writes are in place: a crash mid-write can leave a truncated file, and two
commands running at once can lose one another's changes. Neither is
guarded against.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from todo.errors import StorageError, TaskParseError
from todo.models import Task
from todo.store import find_duplicate_ids

logger = logging.getLogger(__name__)

_TASK_LIST = TypeAdapter(list[Task])


def _reason(e: OSError) -> str:
    return e.strerror or str(e)


def load_tasks(path: Path) -> list[Task]:
    """Load the task list from disk.

    A missing file is an empty list. Duplicate ids are kept as they are
    and only logged.

    Raises:
        StorageError: the file exists but could not be read
        TaskParseError: the file is not a JSON array of task records
    """
    try:
        exists = path.exists()
    except OSError as e:
        raise StorageError(path, "read", _reason(e)) from e

    if not exists:
        logger.debug("No tasks file at %s, starting empty", path)
        return []

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise StorageError(path, "read", _reason(e)) from e
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError
        raise TaskParseError(path, str(e)) from e

    try:
        tasks = _TASK_LIST.validate_python(data)
    except ValidationError as e:
        raise TaskParseError(path, str(e)) from e

    duplicates = find_duplicate_ids(tasks)
    if duplicates:
        logger.warning(
            "%s contains duplicate task ids: %s",
            path,
            ", ".join(str(i) for i in duplicates),
        )

    logger.debug("Loaded %d task(s) from %s", len(tasks), path)
    return tasks


def save_tasks(tasks: list[Task], path: Path) -> None:
    """Write the full task list to disk, replacing what was there.

    Raises:
        StorageError: the directory or file could not be created or written
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageError(path.parent, "create directory", _reason(e)) from e

    # Encode before opening so a failure leaves the old file intact.
    try:
        records = _TASK_LIST.dump_python(tasks, mode="json")
        content = (json.dumps(records, indent=2, ensure_ascii=False) + "\n").encode("utf-8")
    except ValueError as e:
        # UnicodeEncodeError, e.g. lone surrogates from undecodable argv
        raise StorageError(path, "write", str(e)) from e

    try:
        with open(path, "wb") as f:
            f.write(content)
    except OSError as e:
        raise StorageError(path, "write", _reason(e)) from e

    logger.debug("Saved %d task(s) to %s", len(tasks), path)
