# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console

from weekline.color import find_preset
from weekline.exceptions import WeeklineError
from weekline.repository.event import EVENT_REPO
from weekline.service import timeline as timeline_service
from weekline.service.timeline import get_timeline_data
from weekline.terminal.completion import complete_preset
from weekline.terminal.custom_typer import AliasedTyperGroup
from weekline.terminal.error import exit_with_error
from weekline.terminal.validate import validate_color, validate_week_date
from weekline.view.views import event as event_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("set, s", no_args_is_help=True)
def set(
    task_id: int,
    week_date: Annotated[
        str,
        typer.Argument(callback=validate_week_date, help="valid input: YYYY-MM-DD"),
    ],
    label: Annotated[str, typer.Argument(autocompletion=complete_preset)],
    color: Annotated[
        Optional[str],
        typer.Option(
            "--color",
            "-col",
            callback=validate_color,
            help="valid input: #rrggbb or a color name",
        ),
    ] = None,
) -> None:
    """
    Create or replace the event shown at a task's week.

    A label matching a preset takes the preset color unless --color is given.
    """
    preset = find_preset(label)
    if color is None and preset is not None:
        color = preset["color"]

    try:
        event = timeline_service.set_cell_event(task_id, week_date, label, color)
    except WeeklineError as e:
        exit_with_error(e)

    event_report.single_event_view(event)


@app.command("move, mv", no_args_is_help=True)
def move(
    id: int,
    week_date: Annotated[
        str,
        typer.Argument(callback=validate_week_date, help="valid input: YYYY-MM-DD"),
    ],
) -> None:
    try:
        event = timeline_service.update_event(id, week_date=week_date)
    except WeeklineError as e:
        exit_with_error(e)

    event_report.single_event_view(event)


@app.command("delete, d", no_args_is_help=True)
def delete(id: int) -> None:
    try:
        deleted_event = timeline_service.delete_event(id)
    except WeeklineError as e:
        exit_with_error(e)

    Console().print(
        f"Deleted event {id} ({deleted_event['label'] or 'unlabelled'}) "
        f"at {deleted_event['week_date']}"
    )


@app.command("clear, c", no_args_is_help=True)
def clear(
    task_id: int,
    week_date: Annotated[
        str,
        typer.Argument(callback=validate_week_date, help="valid input: YYYY-MM-DD"),
    ],
) -> None:
    """Remove the event shown at a task's week, if any."""
    deleted_event = timeline_service.clear_cell_event(task_id, week_date)

    console = Console()
    if deleted_event is None:
        console.print(f"No event at task {task_id}, {week_date}")
    else:
        console.print(f"Deleted event {deleted_event['id']} at {week_date}")


@app.command("list, l")
def list_events(
    task_id: Annotated[Optional[int], typer.Option("--task-id", "-t")] = None,
    week_date: Annotated[
        Optional[str],
        typer.Option("--week", "-w", callback=validate_week_date),
    ] = None,
) -> None:
    data = get_timeline_data()
    events = data["events"]
    if task_id is not None:
        events = [event for event in events if event["task_id"] == task_id]
    if week_date is not None:
        events = [event for event in events if event["week_date"] == week_date]

    event_report.events_view(events, data["tasks"])


@app.command("show, sh", no_args_is_help=True)
def show(id: int) -> None:
    try:
        event = EVENT_REPO.get_event(id)
    except WeeklineError as e:
        exit_with_error(e)

    event_report.single_event_view(event)
