# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from weekline.color import CURRENT_WEEK_STYLE, PAST_WEEK_STYLE
from weekline.view.grid import GridCell, HeaderCell, TimelineGrid
from weekline.view.state import get_no_wrap
from weekline.view.views.header import header

LABEL_COLUMN_WIDTH = 32


def visible_column_count(console_width: int, column_width: int) -> int:
    # Each week column also takes a separator and one space of padding each side
    available_width = console_width - LABEL_COLUMN_WIDTH - 3
    return max(1, available_width // (column_width + 3))


def _header_text(header_cell: HeaderCell) -> Text:
    if header_cell["is_current"]:
        return Text(header_cell["label"], style=CURRENT_WEEK_STYLE)
    if header_cell["is_past"]:
        return Text(header_cell["label"], style=PAST_WEEK_STYLE)
    return Text(header_cell["label"])


def _cell_text(cell: GridCell, column_width: int) -> Text:
    if cell["event"] is None:
        return Text("·", style="on grey15" if cell["is_current"] else "dim")
    label = cell["label"][:column_width].ljust(column_width)
    return Text(label, style=f"black on {cell['color']}")


def timeline_view(
    grid: TimelineGrid,
    first_column: int = 0,
    column_width: int = 8,
    max_columns: Optional[int] = None,
    console: Optional[Console] = None,
) -> None:
    """
    Display the timeline grid as a table of categories and tasks against weeks.

    Args:
        grid: The grid to display
        first_column: Index of the first week column shown (scroll position)
        column_width: Characters per week column
        max_columns: Number of week columns to show (defaults to what fits)
        console: Console to print to (defaults to a new console)
    """
    if console is None:
        console = Console()

    header(console, "timeline")

    if not grid["header"]:
        console.print("\n[dim]No week dates configured[/dim]\n")
        return
    if not grid["categories"]:
        console.print("\n[dim]No tasks to display[/dim]\n")

    if max_columns is None:
        max_columns = visible_column_count(console.width, column_width)
    first_column = min(max(0, first_column), len(grid["header"]) - 1)
    last_column = min(len(grid["header"]), first_column + max_columns)
    visible_header = grid["header"][first_column:last_column]

    table = Table(box=box.SIMPLE_HEAD, show_edge=False)
    table.add_column(
        grid["label_header"],
        width=LABEL_COLUMN_WIDTH,
        no_wrap=get_no_wrap(),
        overflow="ellipsis",
    )
    for header_cell in visible_header:
        table.add_column(
            _header_text(header_cell),
            width=column_width,
            no_wrap=True,
            justify="center",
        )

    for category_row in grid["categories"]:
        marker = "▸" if category_row["collapsed"] else "▾"
        category_label = Text.assemble(
            (f"{marker} {category_row['category']} ", "bold"),
            (f"({category_row['task_count']})", "dim"),
        )
        table.add_row(category_label, *["" for _ in visible_header])

        for task_row in category_row["task_rows"]:
            cells = task_row["cells"][first_column:last_column]
            table.add_row(
                Text(f"   {task_row['task']['task']}"),
                *[_cell_text(cell, column_width) for cell in cells],
            )

    first_label = visible_header[0]["label"]
    last_label = visible_header[-1]["label"]
    console.print(
        f"\n[bold]{first_label} to {last_label}[/bold] "
        f"(weeks {first_column + 1}-{last_column} of {len(grid['header'])})\n"
    )
    console.print(table)
    console.print()
