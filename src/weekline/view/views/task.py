# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from weekline.model.event import Event
from weekline.model.task import Task
from weekline.time import format_header
from weekline.view.views.header import header


def tasks_view(
    tasks: list[Task],
    events_by_task: dict[int, list[Event]] = {},
    console: Optional[Console] = None,
) -> None:
    if console is None:
        console = Console()

    header(console, "tasks")

    tasks_table = Table(box=box.SIMPLE)
    tasks_table.add_column("id")
    tasks_table.add_column("category")
    tasks_table.add_column("task")
    tasks_table.add_column("order")
    tasks_table.add_column("events")

    for task in tasks:
        event_count = len(events_by_task.get(task["id"] or 0, []))
        tasks_table.add_row(
            str(task["id"]),
            task["category"],
            task["task"],
            str(task["sort_order"]),
            str(event_count) if event_count else "",
        )

    console.print(tasks_table)


def single_task_view(
    task: Task,
    events: list[Event] = [],
    console: Optional[Console] = None,
) -> None:
    if console is None:
        console = Console()

    header(console, "task")

    task_table = Table(box=box.SIMPLE)
    task_table.add_column("property")
    task_table.add_column("value")

    task_table.add_row("id", str(task["id"]))
    task_table.add_row("category", task["category"])
    task_table.add_row("task", task["task"])
    task_table.add_row("sort_order", str(task["sort_order"]))
    task_table.add_row("created", task["created"].in_tz("local").to_datetime_string())
    task_table.add_row("updated", task["updated"].in_tz("local").to_datetime_string())

    task_events = [event for event in events if event["task_id"] == task["id"]]
    if task_events:
        task_table.add_row(
            "events",
            ", ".join(
                f"{format_header(event['week_date'])}: {event['label'] or ''}"
                for event in task_events
            ),
        )

    console.print(task_table)
