# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from weekline.color import DEFAULT_EVENT_COLOR
from weekline.model.summary import Milestone, TimelineSummary
from weekline.view.views.header import header

BAR_WIDTH = 20


def _bar(value: int, maximum: int, color: str) -> Text:
    width = round(BAR_WIDTH * value / maximum) if maximum else 0
    return Text("█" * width, style=color)


def _milestone_table(title: str, milestones: list[Milestone]) -> Table:
    table = Table(title=title, box=box.SIMPLE, title_justify="left")
    table.add_column("when")
    table.add_column("event")
    table.add_column("task")
    table.add_column("category", style="dim")

    for milestone in milestones:
        event = milestone["event"]
        color = event["color"] or DEFAULT_EVENT_COLOR
        table.add_row(
            milestone["date_label"],
            Text(event["label"] or "", style=f"black on {color}"),
            milestone["task"],
            milestone["category"],
        )
    return table


def summary_view(summary: TimelineSummary, console: Optional[Console] = None) -> None:
    if console is None:
        console = Console()

    header(console, "summary")

    totals = Table(box=box.SIMPLE, show_header=False)
    totals.add_column("property", style="cyan")
    totals.add_column("value")
    totals.add_row("timespan", summary["timespan"])
    totals.add_row("categories", str(summary["total_categories"]))
    totals.add_row("tasks", str(summary["total_tasks"]))
    totals.add_row("events", str(summary["total_events"]))
    totals.add_row(
        "",
        f"{summary['completed_events']} completed, "
        f"{summary['this_week_events']} this week, "
        f"{summary['upcoming_events']} upcoming",
    )
    progress = f"{summary['progress_percent']}%"
    if summary["is_project_complete"]:
        progress += " (complete)"
    totals.add_row("progress", progress)
    console.print(totals)

    if summary["is_project_complete"]:
        upcoming_title, recent_title = "Final milestones", "Earlier milestones"
    else:
        upcoming_title, recent_title = "Upcoming (2 weeks)", "Recent (2 weeks)"
    console.print(_milestone_table(upcoming_title, summary["upcoming_milestones"]))
    console.print(_milestone_table(recent_title, summary["recent_milestones"]))

    breakdown = summary["category_breakdown"]
    if breakdown:
        categories = Table(title="Categories", box=box.SIMPLE, title_justify="left")
        categories.add_column("category")
        categories.add_column("tasks", justify="right")
        categories.add_column("events", justify="right")
        categories.add_column("")
        most_events = max(row["events"] for row in breakdown)
        for row in breakdown:
            categories.add_row(
                row["name"],
                str(row["tasks"]),
                str(row["events"]),
                _bar(row["events"], most_events, row["color"]),
            )
        console.print(categories)

    event_types = summary["event_type_breakdown"]
    if event_types:
        types = Table(title="Event types", box=box.SIMPLE, title_justify="left")
        types.add_column("label")
        types.add_column("count", justify="right")
        for event_type in event_types:
            types.add_row(
                Text(event_type["name"], style=f"black on {event_type['color']}"),
                str(event_type["count"]),
            )
        console.print(types)

    activity = summary["weekly_activity"]
    if activity:
        weeks = Table(title="Weekly activity", box=box.SIMPLE, title_justify="left")
        weeks.add_column("week")
        weeks.add_column("events", justify="right")
        weeks.add_column("")
        busiest = max(week["events"] for week in activity)
        for week in activity:
            weeks.add_row(
                week["label"],
                str(week["events"]),
                _bar(week["events"], busiest, "dark_cyan"),
            )
        console.print(weeks)
