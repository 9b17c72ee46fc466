# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import click
import typer
from rich.console import Console

from weekline.exceptions import WeeklineError
from weekline.form.task import TaskForm, TaskFormData
from weekline.repository.configuration import CONFIGURATION_REPO
from weekline.repository.event import EVENT_REPO
from weekline.repository.task import TASK_REPO
from weekline.service import timeline as timeline_service
from weekline.service.category import get_all_categories
from weekline.service.timeline import get_timeline_data
from weekline.terminal.completion import complete_category
from weekline.terminal.custom_typer import AliasedTyperGroup
from weekline.terminal.error import exit_with_error
from weekline.view.views import task as task_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    category: Annotated[str, typer.Argument(autocompletion=complete_category)],
    task: str,
    sort_order: Annotated[int, typer.Option("--sort-order", "-o")] = 0,
) -> None:
    try:
        new_task = timeline_service.create_task(category, task, sort_order)
    except WeeklineError as e:
        exit_with_error(e)

    task_report.single_task_view(new_task)


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: int,
    category: Annotated[
        Optional[str],
        typer.Option("--category", "-c", autocompletion=complete_category),
    ] = None,
    task: Annotated[Optional[str], typer.Option("--task", "-t")] = None,
    sort_order: Annotated[Optional[int], typer.Option("--sort-order", "-o")] = None,
) -> None:
    try:
        updated_task = timeline_service.update_task(id, category, task, sort_order)
    except WeeklineError as e:
        exit_with_error(e)

    task_report.single_task_view(updated_task, EVENT_REPO.get_all_events())


@app.command("delete, d", no_args_is_help=True)
def delete(
    id: int,
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Skip the confirmation prompt")
    ] = False,
) -> None:
    """Delete a task together with all of its events."""
    if not yes:
        typer.confirm(f"Delete task {id} and its events?", abort=True)

    try:
        deleted_task = timeline_service.delete_task(id)
    except WeeklineError as e:
        exit_with_error(e)

    Console().print(f"Deleted task {id}: {deleted_task['task']}")


@app.command("list, l")
def list_tasks(
    category: Annotated[
        Optional[str],
        typer.Option("--category", "-c", autocompletion=complete_category),
    ] = None,
) -> None:
    data = get_timeline_data()
    tasks = data["tasks"]
    if category is not None:
        tasks = [task for task in tasks if task["category"] == category]

    task_report.tasks_view(tasks, data["events_by_task"])


@app.command("form, f")
def form(
    id: Annotated[
        Optional[int], typer.Option("--id", "-i", help="Edit this task")
    ] = None,
) -> None:
    """Create or edit a task interactively."""
    console = Console()

    task = None
    if id is not None:
        if not TASK_REPO.task_exists(id):
            exit_with_error(f"No task found with id {id}")
        task = TASK_REPO.get_task(id)

    def save(data: TaskFormData) -> None:
        if task is None:
            saved = timeline_service.create_task(data["category"], data["task"])
        else:
            assert task["id"] is not None
            saved = timeline_service.update_task(
                task["id"], data["category"], data["task"]
            )
        task_form.close()
        task_report.single_task_view(saved, console=console)

    def delete_task(task_id: int) -> None:
        deleted_task = timeline_service.delete_task(task_id)
        task_form.close()
        console.print(f"Deleted task {task_id}: {deleted_task['task']}")

    task_form = TaskForm(
        on_save=save,
        on_delete=delete_task,
        on_close=lambda: None,
        default_categories=CONFIGURATION_REPO.get_config()["default_categories"],
    )
    task_form.open(task, get_all_categories())

    console.print(f"[bold]{task_form.title}[/bold]")
    for index, name in enumerate(task_form.available_categories, start=1):
        console.print(f"  {index}. {name}")
    console.print("  n. New category")

    choice = typer.prompt("Category", default=task_form.category or "n")
    if choice == "n":
        task_form.start_new_category()
        task_form.set_new_category(typer.prompt("New category name"))
    elif choice.isdigit() and 1 <= int(choice) <= len(task_form.available_categories):
        task_form.select_category(task_form.available_categories[int(choice) - 1])
    else:
        task_form.select_category(choice)

    task_form.set_task_name(typer.prompt("Task", default=task_form.task_name or None))

    action = task_form.save_label.lower()
    if task_form.can_delete:
        action = typer.prompt(
            "Action",
            default=action,
            type=click.Choice([action, "delete", "cancel"]),
        )
    if action == "cancel":
        task_form.cancel()
        return

    try:
        if action == "delete":
            task_form.delete()
        elif not task_form.save():
            exit_with_error("Category and task are required")
    except WeeklineError as e:
        exit_with_error(e)
