"""Task store - the operations behind each command.

Every function takes the current task list and returns a new one, leaving
the input untouched. Callers decide whether the result needs saving.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterator

from todo.models import Task, now_epoch

logger = logging.getLogger(__name__)


def next_id(tasks: list[Task]) -> int:
    """Return one more than the highest id present, or 1 for an empty list.

    Computed from the live list on every call, so removing the highest
    task frees its id for the next add.
    """
    return max((t.id for t in tasks), default=0) + 1


def add_task(
    tasks: list[Task], text: str, now: int | None = None
) -> tuple[list[Task], Task]:
    """Append a new pending task. Returns (tasks, new_task)."""
    task = Task(
        id=next_id(tasks),
        text=text,
        done=False,
        created_at=now_epoch() if now is None else now,
    )
    logger.debug("Adding task %d", task.id)
    return [*tasks, task], task


def iter_tasks(tasks: list[Task], include_done: bool = False) -> Iterator[Task]:
    """Yield tasks in list order, skipping completed ones unless include_done."""
    return (t for t in tasks if include_done or not t.done)


def complete_task(tasks: list[Task], task_id: int) -> tuple[list[Task], bool]:
    """Mark the first task with task_id as done.

    Returns (tasks, found). Completing an already-done task still counts
    as found.
    """
    updated: list[Task] = []
    found = False
    for task in tasks:
        if not found and task.id == task_id:
            task = task.model_copy(update={"done": True})
            found = True
        updated.append(task)

    if not found:
        logger.debug("No task with id %d to complete", task_id)
    return updated, found


def remove_task(tasks: list[Task], task_id: int) -> tuple[list[Task], bool]:
    """Drop every task with task_id. Returns (tasks, found)."""
    remaining = [t for t in tasks if t.id != task_id]
    found = len(remaining) < len(tasks)
    if found:
        logger.debug("Removed task %d", task_id)
    return remaining, found


def clear_completed(tasks: list[Task]) -> tuple[list[Task], int]:
    """Drop all completed tasks. Returns (tasks, removed_count)."""
    remaining = [t for t in tasks if not t.done]
    removed = len(tasks) - len(remaining)
    logger.debug("Cleared %d completed task(s)", removed)
    return remaining, removed


def find_duplicate_ids(tasks: list[Task]) -> list[int]:
    """Ids that appear more than once, in first-seen order."""
    counts = Counter(t.id for t in tasks)
    return [task_id for task_id, n in counts.items() if n > 1]
