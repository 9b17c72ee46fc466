# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console

from weekline.repository.configuration import CONFIGURATION_REPO
from weekline.service.category import CollapsedCategories
from weekline.service.summary import summarize_timeline
from weekline.service.timeline import get_timeline_data
from weekline.terminal.completion import complete_category
from weekline.terminal.custom_typer import AliasedTyperGroup
from weekline.view import state as view_state
from weekline.view.grid import TimelineChart
from weekline.view.views import task as task_report
from weekline.view.views.summary import summary_view
from weekline.view.views.timeline import timeline_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _ignore(*args: object) -> None:
    pass


@app.command("timeline, tl")
def timeline(
    collapse: Annotated[
        Optional[list[str]],
        typer.Option(
            "--collapse",
            "-c",
            help="Collapse a category (accepts multiple)",
            autocompletion=complete_category,
        ),
    ] = None,
    all_weeks: Annotated[
        bool,
        typer.Option("--all-weeks", "-a", help="Show every week from the start"),
    ] = False,
    first_week: Annotated[
        Optional[int],
        typer.Option("--from", "-f", help="First week column to show (1-based)"),
    ] = None,
    weeks: Annotated[
        Optional[int],
        typer.Option("--weeks", "-w", help="Number of week columns to show"),
    ] = None,
    no_wrap: Annotated[
        bool, typer.Option("--no-wrap", help="Truncate long task names")
    ] = False,
) -> None:
    """
    Display tasks grouped by category against the week axis.

    Unless --all-weeks or --from is given the view opens scrolled to the
    current week.
    """
    config = CONFIGURATION_REPO.get_config()
    data = get_timeline_data()

    if no_wrap:
        view_state.set_no_wrap(True)

    chart = TimelineChart(
        on_cell_click=_ignore,
        on_task_click=_ignore,
        on_category_toggle=_ignore,
        lead_columns=config["scroll_lead_columns"],
    )
    grid = chart.render(
        data["categories"],
        data["events"],
        data["week_dates"],
        CollapsedCategories(collapse or []),
    )

    if first_week is not None:
        first_column = max(0, first_week - 1)
    elif all_weeks:
        first_column = 0
    else:
        first_column = chart.scroll_column

    max_columns = weeks
    if all_weeks and max_columns is None:
        max_columns = len(grid["header"])

    timeline_view(
        grid,
        first_column=first_column,
        column_width=config["column_width"],
        max_columns=max_columns,
        console=Console(),
    )


@app.command("tasks, ts")
def tasks(
    category: Annotated[
        Optional[str],
        typer.Option("--category", "-c", autocompletion=complete_category),
    ] = None,
) -> None:
    data = get_timeline_data()
    task_list = data["tasks"]
    if category is not None:
        task_list = [task for task in task_list if task["category"] == category]

    task_report.tasks_view(task_list, data["events_by_task"])


@app.command("summary, s")
def summary() -> None:
    """Display progress, milestones and breakdowns for the timeline."""
    summary_view(summarize_timeline(get_timeline_data()), console=Console())
