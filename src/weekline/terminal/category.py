# SPDX-License-Identifier: MIT

from typing import Annotated

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from weekline.exceptions import WeeklineError
from weekline.service import category as category_service
from weekline.service.timeline import get_timeline_data
from weekline.terminal.completion import complete_category
from weekline.terminal.custom_typer import AliasedTyperGroup
from weekline.terminal.error import exit_with_error
from weekline.view.views.header import header

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("list, l")
def list_categories() -> None:
    data = get_timeline_data()

    console = Console()
    header(console, "categories")

    table = Table(box=box.SIMPLE)
    table.add_column("category")
    table.add_column("tasks")
    table.add_column("events")

    for category in category_service.sorted_categories(data["categories"]):
        category_tasks = data["categories"][category]
        event_count = sum(
            len(data["events_by_task"].get(task["id"] or 0, []))
            for task in category_tasks
        )
        table.add_row(category, str(len(category_tasks)), str(event_count))

    console.print(table)


@app.command("rename, r", no_args_is_help=True)
def rename(
    old_category: Annotated[str, typer.Argument(autocompletion=complete_category)],
    new_category: str,
) -> None:
    try:
        renamed_count = category_service.rename_category(old_category, new_category)
    except WeeklineError as e:
        exit_with_error(e)

    if renamed_count == 0:
        exit_with_error(f"No tasks in category '{old_category}'")
    Console().print(
        f"Renamed '{old_category}' to '{new_category.strip()}' on {renamed_count} tasks"
    )


@app.command("delete, d", no_args_is_help=True)
def delete(
    category: Annotated[str, typer.Argument(autocompletion=complete_category)],
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Skip the confirmation prompt")
    ] = False,
) -> None:
    """Delete every task in a category together with their events."""
    if not yes:
        typer.confirm(f"Delete category '{category}' and all its tasks?", abort=True)

    deleted_count = category_service.delete_category(category)
    if deleted_count == 0:
        exit_with_error(f"No tasks in category '{category}'")
    Console().print(f"Deleted category '{category}' with {deleted_count} tasks")
