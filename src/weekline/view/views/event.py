# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from weekline.color import DEFAULT_EVENT_COLOR
from weekline.model.event import Event
from weekline.model.task import Task
from weekline.view.views.header import header


def events_view(
    events: list[Event],
    tasks: list[Task] = [],
    console: Optional[Console] = None,
) -> None:
    if console is None:
        console = Console()

    header(console, "events")

    task_names = {task["id"]: task["task"] for task in tasks}

    events_table = Table(box=box.SIMPLE)
    events_table.add_column("id")
    events_table.add_column("week")
    events_table.add_column("task")
    events_table.add_column("label")
    events_table.add_column("color")

    for event in events:
        color = event["color"] or DEFAULT_EVENT_COLOR
        events_table.add_row(
            str(event["id"]),
            event["week_date"],
            task_names.get(event["task_id"], str(event["task_id"])),
            event["label"] or "",
            Text(color, style=f"black on {color}"),
        )

    console.print(events_table)


def single_event_view(event: Event, console: Optional[Console] = None) -> None:
    if console is None:
        console = Console()

    header(console, "event")

    event_table = Table(box=box.SIMPLE)
    event_table.add_column("property")
    event_table.add_column("value")

    color = event["color"] or DEFAULT_EVENT_COLOR
    event_table.add_row("id", str(event["id"]))
    event_table.add_row("task_id", str(event["task_id"]))
    event_table.add_row("week_date", event["week_date"])
    event_table.add_row("label", event["label"] or "")
    event_table.add_row("color", Text(color, style=f"black on {color}"))

    console.print(event_table)
