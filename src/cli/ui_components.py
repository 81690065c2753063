"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from presentation details.
- Tables can be reused by several commands.
"""

from __future__ import annotations

from rich.markup import escape
from rich.table import Table

from core.domain.models import Task, TaskCollection


def _tags_cell(task: Task) -> str:
    return ", ".join(sorted(tag.value for tag in task.tags))


def _attachments_cell(task: Task) -> str:
    return ", ".join(sorted(attachment.name for attachment in task.attachments))


def build_tasks_table(collection: TaskCollection, *, title: str | None = None) -> Table:
    """Rich table with one row per task, in collection order."""

    table = Table(title=escape(title) if title else "Tasks")
    table.add_column("#", style="dim", justify="right", no_wrap=True)
    table.add_column("Name", style="cyan")
    table.add_column("P", style="yellow", justify="center", no_wrap=True)
    table.add_column("Deadline", style="magenta", no_wrap=True)
    table.add_column("Phone", style="white")
    table.add_column("Email", style="white")
    table.add_column("Address", style="white")
    table.add_column("Tags", style="green")
    table.add_column("Attachments", style="blue")

    for index, task in enumerate(collection.tasks, start=1):
        table.add_row(
            str(index),
            escape(task.name.value),
            task.priority.value,
            str(task.deadline),
            task.phone.value,
            escape(task.email.value),
            escape(task.address.value),
            escape(_tags_cell(task)),
            escape(_attachments_cell(task)),
        )
    return table
