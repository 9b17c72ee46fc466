# SPDX-License-Identifier: MIT

from collections.abc import Callable, Container, Mapping, Sequence
from typing import TypeAlias, Literal, Optional, TypedDict

import pendulum

from weekline.color import DEFAULT_EVENT_COLOR
from weekline.model.event import Event
from weekline.model.task import Task
from weekline.service.category import sorted_categories
from weekline.service.event_index import EventIndex, EventIndexCache
from weekline.time import format_header, now_local, week_status

LABEL_COLUMN_HEADER = "Category / Task"

ScrollState: TypeAlias = Literal["not_attempted", "scrolled", "noop"]

CellClickHandler: TypeAlias = Callable[[int, str, Optional[Event]], None]
TaskClickHandler: TypeAlias = Callable[[Task], None]
CategoryToggleHandler: TypeAlias = Callable[[str], None]


class HeaderCell(TypedDict):
    week_date: str
    label: str
    is_current: bool
    is_past: bool


class GridCell(TypedDict):
    task_id: int
    week_date: str
    event: Optional[Event]
    label: str
    color: Optional[str]
    is_current: bool


class TaskRow(TypedDict):
    task: Task
    cells: list[GridCell]


class CategoryRow(TypedDict):
    category: str
    task_count: int
    collapsed: bool
    task_rows: list[TaskRow]


class TimelineGrid(TypedDict):
    label_header: str
    header: list[HeaderCell]
    categories: list[CategoryRow]
    current_week_index: Optional[int]


def build_timeline_grid(
    categories: Mapping[str, Sequence[Task]],
    event_index: EventIndex,
    week_dates: Sequence[str],
    collapsed: Container[str],
    now: Optional[pendulum.DateTime] = None,
) -> TimelineGrid:
    """
    Lay out the timeline as header, category rows and task rows.

    A pure function of its inputs. Collapsed categories keep their header
    row and task count but have no task rows.

    Args:
        categories: Tasks grouped by category name, in display order per group
        event_index: Lookup of the event at each (task_id, week_date)
        week_dates: Ascending week-date axis, one column per entry
        collapsed: Names of the collapsed categories
        now: Moment used to classify current and past weeks (defaults to now)
    """
    if now is None:
        now = now_local()

    header: list[HeaderCell] = []
    current_week_index: Optional[int] = None
    for index, week_date in enumerate(week_dates):
        status = week_status(week_date, now)
        header.append(
            {
                "week_date": week_date,
                "label": format_header(week_date),
                "is_current": status == "current",
                "is_past": status == "past",
            }
        )
        if status == "current" and current_week_index is None:
            current_week_index = index

    category_rows: list[CategoryRow] = []
    for category in sorted_categories(categories):
        category_tasks = categories[category]
        is_collapsed = category in collapsed

        task_rows: list[TaskRow] = []
        if not is_collapsed:
            for task in category_tasks:
                assert task["id"] is not None
                cells: list[GridCell] = []
                for header_cell in header:
                    event = event_index.get(task["id"], header_cell["week_date"])
                    cells.append(
                        {
                            "task_id": task["id"],
                            "week_date": header_cell["week_date"],
                            "event": event,
                            "label": (event["label"] or "") if event else "",
                            "color": (event["color"] or DEFAULT_EVENT_COLOR)
                            if event
                            else None,
                            "is_current": header_cell["is_current"],
                        }
                    )
                task_rows.append({"task": task, "cells": cells})

        category_rows.append(
            {
                "category": category,
                "task_count": len(category_tasks),
                "collapsed": is_collapsed,
                "task_rows": task_rows,
            }
        )

    return {
        "label_header": LABEL_COLUMN_HEADER,
        "header": header,
        "categories": category_rows,
        "current_week_index": current_week_index,
    }


class TimelineChart:
    """
    Interactive timeline grid for one mounted view.

    Renders grids, turns clicks into host callbacks and aligns the initial
    scroll position once. The host owns the data, the collapsed set and
    persistence; the chart keeps only its event index cache, the last
    rendered index and the one-shot scroll state.
    """

    def __init__(
        self,
        on_cell_click: CellClickHandler,
        on_task_click: TaskClickHandler,
        on_category_toggle: CategoryToggleHandler,
        lead_columns: int = 2,
    ) -> None:
        self._on_cell_click = on_cell_click
        self._on_task_click = on_task_click
        self._on_category_toggle = on_category_toggle
        self._lead_columns = lead_columns
        self._index_cache = EventIndexCache()
        self._index: Optional[EventIndex] = None
        self.scroll_state: ScrollState = "not_attempted"
        self.scroll_column = 0

    def render(
        self,
        categories: Mapping[str, Sequence[Task]],
        events: list[Event],
        week_dates: Sequence[str],
        collapsed: Container[str],
        now: Optional[pendulum.DateTime] = None,
    ) -> TimelineGrid:
        self._index = self._index_cache.index_for(events)
        grid = build_timeline_grid(categories, self._index, week_dates, collapsed, now)
        self._align_scroll(grid)
        return grid

    def _align_scroll(self, grid: TimelineGrid) -> None:
        # Attempted once, on the first render that has week columns
        if self.scroll_state != "not_attempted" or not grid["header"]:
            return
        current_week_index = grid["current_week_index"]
        if current_week_index is None:
            self.scroll_state = "noop"
            return
        self.scroll_column = max(0, current_week_index - self._lead_columns)
        self.scroll_state = "scrolled"

    def scroll_offset(self, column_width: int) -> int:
        return self.scroll_column * column_width

    def click_category(self, category: str) -> None:
        self._on_category_toggle(category)

    def click_task(self, task: Task) -> None:
        self._on_task_click(task)

    def click_cell(
        self, task_id: int, week_date: str, events: Optional[list[Event]] = None
    ) -> None:
        """Report a cell click with the event shown at that cell.

        Without events the cell is resolved against the last rendered grid,
        which goes stale once the host refreshes without re-rendering. Hosts
        holding newer data pass their current event list.
        """
        if events is not None:
            index: Optional[EventIndex] = self._index_cache.index_for(events)
        else:
            index = self._index
        event = index.get(task_id, week_date) if index else None
        self._on_cell_click(task_id, week_date, event)
