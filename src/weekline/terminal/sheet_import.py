# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from weekline.exceptions import WeeklineError
from weekline.repository.configuration import CONFIGURATION_REPO
from weekline.service.sheet_import import import_timeline_csv
from weekline.terminal.error import exit_with_error


def sheet_import(
    path: Annotated[
        Path,
        typer.Argument(
            exists=True,
            dir_okay=False,
            readable=True,
            help="CSV export of the timeline sheet",
        ),
    ],
    keep_week_axis: Annotated[
        bool,
        typer.Option(
            "--keep-week-axis",
            help="Do not replace the configured week dates with the sheet's",
        ),
    ] = False,
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Skip the confirmation prompt")
    ] = False,
) -> None:
    """
    Replace all tasks and events with the contents of a timeline sheet.

    Column A holds categories, column B tasks and the following columns one
    week each, headed by dates like "Nov 14" or "11/14".
    """
    if not yes:
        typer.confirm("This replaces all tasks and events. Continue?", abort=True)

    try:
        result = import_timeline_csv(path)
    except WeeklineError as e:
        exit_with_error(e)

    if not keep_week_axis and result["week_dates"]:
        CONFIGURATION_REPO.update_config(week_dates=result["week_dates"])

    Console().print(
        f"[green]Imported {result['tasks']} tasks and {result['events']} events "
        f"across {len(result['week_dates'])} weeks[/green]"
    )
