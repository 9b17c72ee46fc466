# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from weekline import configuration
from weekline.repository.configuration import CONFIGURATION_REPO
from weekline.terminal.custom_typer import AliasedTyperGroup
from weekline.terminal.validate import (
    validate_log_level,
    validate_positive,
    validate_week_date,
    validate_week_dates,
)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _configuration_table(title: Optional[str] = None) -> Table:
    config = CONFIGURATION_REPO.get_config()

    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header", "✓ Enabled" if config["show_header"] else "✗ Disabled"
    )
    table.add_row("log_level", config["log_level"])
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("timeline_start", str(config["timeline_start"]))
    table.add_row("timeline_weeks", str(config["timeline_weeks"]))
    table.add_row(
        "week_dates",
        ", ".join(str(week_date) for week_date in config["week_dates"])
        if config["week_dates"]
        else "None (generated)",
    )
    table.add_row(
        "default_categories",
        ", ".join(config["default_categories"])
        if config["default_categories"]
        else "None (built-in)",
    )
    table.add_row(
        "auto_color_events",
        "✓ Enabled" if config["auto_color_events"] else "✗ Disabled",
    )
    table.add_row("column_width", str(config["column_width"]))
    table.add_row("scroll_lead_columns", str(config["scroll_lead_columns"]))

    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    console = Console()
    console.print(_configuration_table())

    week_dates = CONFIGURATION_REPO.get_week_dates()
    if week_dates:
        console.print(
            f"\nWeek axis: {week_dates[0]} to {week_dates[-1]} ({len(week_dates)} weeks)"
        )


@app.command("set, s")
def set(
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Show the header above reports",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            callback=validate_log_level,
            help="valid input: DEBUG, INFO, WARNING, ERROR, CRITICAL",
        ),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory path for storing data files",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Reset data path to the platform default",
        ),
    ] = False,
    timeline_start: Annotated[
        Optional[str],
        typer.Option(
            "--timeline-start",
            callback=validate_week_date,
            help="First week of the generated axis, YYYY-MM-DD",
        ),
    ] = None,
    timeline_weeks: Annotated[
        Optional[int],
        typer.Option(
            "--timeline-weeks",
            callback=validate_positive,
            help="Number of weeks in the generated axis",
        ),
    ] = None,
    week_dates: Annotated[
        Optional[list[str]],
        typer.Option(
            "--week-date",
            callback=validate_week_dates,
            help="Explicit week date, YYYY-MM-DD (accepts multiple)",
        ),
    ] = None,
    remove_week_dates: Annotated[
        bool,
        typer.Option(
            "--remove-week-dates",
            help="Go back to the generated week axis",
        ),
    ] = False,
    default_categories: Annotated[
        Optional[list[str]],
        typer.Option(
            "--default-category",
            help="Category offered when none exist (accepts multiple)",
        ),
    ] = None,
    remove_default_categories: Annotated[
        bool,
        typer.Option(
            "--remove-default-categories",
            help="Go back to the built-in default categories",
        ),
    ] = False,
    auto_color_events: Annotated[
        Optional[bool],
        typer.Option(
            "--auto-color-events/--no-auto-color-events",
            help="Color new events from their label",
        ),
    ] = None,
    column_width: Annotated[
        Optional[int],
        typer.Option(
            "--column-width",
            callback=validate_positive,
            help="Characters per week column",
        ),
    ] = None,
    scroll_lead_columns: Annotated[
        Optional[int],
        typer.Option(
            "--scroll-lead-columns",
            help="Weeks shown before the current week",
        ),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    if scroll_lead_columns is not None and scroll_lead_columns < 0:
        raise typer.BadParameter(
            "Must not be negative", param_hint="--scroll-lead-columns"
        )

    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        log_level=log_level,
        data_path=data_path,
        remove_data_path=remove_data_path,
        timeline_start=timeline_start,
        timeline_weeks=timeline_weeks,
        week_dates=week_dates,
        remove_week_dates=remove_week_dates,
        default_categories=default_categories,
        remove_default_categories=remove_default_categories,
        auto_color_events=auto_color_events,
        column_width=column_width,
        scroll_lead_columns=scroll_lead_columns,
    )

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(_configuration_table("Updated Configuration"))

    if data_path is not None or remove_data_path:
        console.print(
            "\n[yellow]Data path changed; existing data files are not moved.[/yellow]"
        )
