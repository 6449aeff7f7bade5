"""CLI interface for todo."""

from __future__ import annotations

import logging
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from todo import __version__
from todo.config import DATA_DIR_ENV, TodoConfig
from todo.errors import TodoError
from todo.logging_setup import setup_logging
from todo.models import Task
from todo.storage import load_tasks, save_tasks
from todo.store import add_task, clear_completed, complete_task, iter_tasks, remove_task

console = Console()
logger = logging.getLogger(__name__)

TASK_ID = click.IntRange(min=1)


@click.group()
@click.version_option(version=__version__, prog_name="todo")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.option(
    "--data-dir",
    type=click.Path(),
    envvar=DATA_DIR_ENV,
    help="Directory holding tasks.json (default: ~/.todo)",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, data_dir: str | None) -> None:
    """todo - a tiny JSON-backed to-do list.

    \b
    Examples:
      todo add "buy milk"
      todo list --all
      todo done 1
    """
    setup_logging(verbose)
    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = TodoConfig.resolve(data_dir)
    except TodoError as e:
        _fail(ctx, e)


def _fail(ctx: click.Context, error: TodoError) -> NoReturn:
    logger.debug("Aborting: %r", error)
    console.print(f"[red]Error:[/red] {escape(str(error))}", highlight=False, soft_wrap=True)
    ctx.exit(1)


def _load(ctx: click.Context) -> list[Task]:
    config: TodoConfig = ctx.obj["config"]
    try:
        return load_tasks(config.tasks_file)
    except TodoError as e:
        _fail(ctx, e)


def _save(ctx: click.Context, tasks: list[Task]) -> None:
    config: TodoConfig = ctx.obj["config"]
    try:
        save_tasks(tasks, config.tasks_file)
    except TodoError as e:
        _fail(ctx, e)


@main.command()
@click.argument("text")
@click.pass_context
def add(ctx: click.Context, text: str) -> None:
    """Add a new task."""
    tasks, task = add_task(_load(ctx), text)
    _save(ctx, tasks)
    console.print(f"Added ✅ [dim](id {task.id})[/dim]")


@main.command("list")
@click.option("--all", "-a", "show_all", is_flag=True, help="Show completed too")
@click.pass_context
def list_command(ctx: click.Context, show_all: bool) -> None:
    """List tasks (use --all to include completed)."""
    shown = list(iter_tasks(_load(ctx), include_done=show_all))

    if not shown:
        console.print("(no tasks)" if show_all else "(no tasks - try --all)", markup=False)
        return

    table = Table(show_header=True)
    table.add_column("", width=3)
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Task", style="white")

    for task in shown:
        status = Text("[✓]", style="green") if task.done else Text("[ ]", style="dim")
        table.add_row(status, str(task.id), Text(task.text))

    console.print(table)


@main.command()
@click.argument("task_id", type=TASK_ID)
@click.pass_context
def done(ctx: click.Context, task_id: int) -> None:
    """Mark a task as done by id."""
    tasks, found = complete_task(_load(ctx), task_id)
    if not found:
        console.print(f"No task with id {task_id}")
        return

    _save(ctx, tasks)
    console.print(f"Marked as done: {task_id}")


@main.command()
@click.argument("task_id", type=TASK_ID)
@click.pass_context
def rm(ctx: click.Context, task_id: int) -> None:
    """Remove a task by id."""
    tasks, found = remove_task(_load(ctx), task_id)
    if not found:
        console.print(f"No task with id {task_id}")
        return

    _save(ctx, tasks)
    console.print(f"Removed {task_id}")


@main.command("clear-done")
@click.pass_context
def clear_done(ctx: click.Context) -> None:
    """Clear all completed tasks."""
    tasks, removed = clear_completed(_load(ctx))
    # Saved even when nothing was removed.
    _save(ctx, tasks)
    console.print(f"Removed {removed} completed task(s)")


if __name__ == "__main__":
    main()
