# SPDX-License-Identifier: MIT

import csv
import logging
import re
from collections.abc import Sequence
from pathlib import Path
from typing import Optional, TypedDict

import pendulum

from weekline.color import get_event_color
from weekline.exceptions import SheetImportError
from weekline.repository.configuration import CONFIGURATION_REPO
from weekline.repository.event import EVENT_REPO
from weekline.repository.task import TASK_REPO
from weekline.template.event import get_event_template
from weekline.template.task import get_task_template
from weekline.time import datetime_from_local_date_str

logger = logging.getLogger(__name__)

# Columns A:AB of the sheet: category, task, then up to 26 week columns
FIRST_WEEK_COLUMN = 2
LAST_WEEK_COLUMN = 27

UNCATEGORIZED = "Uncategorized"

MONTH_NUMBERS = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

_MONTH_NAME_RE = re.compile(r"^(\w+)\s+(\d+)$")
_MONTH_SLASH_RE = re.compile(r"^(\d+)/(\d+)$")


class ImportResult(TypedDict):
    tasks: int
    events: int
    week_dates: list[str]


def parse_date_header(header: str, timeline_start: str) -> Optional[str]:
    """
    Parse a sheet column header such as "Nov 14" or "11/14" into an ISO date.

    Headers carry no year. Months at or after the timeline start month are
    placed in the start year, earlier months in the following year.

    Returns:
        'YYYY-MM-DD' string, or None when the header is not a date
    """
    value = str(header).strip()

    month: Optional[int] = None
    day: Optional[int] = None
    name_match = _MONTH_NAME_RE.match(value)
    slash_match = _MONTH_SLASH_RE.match(value)
    if name_match:
        month = MONTH_NUMBERS.get(name_match.group(1).lower()[:3])
        day = int(name_match.group(2))
    elif slash_match:
        month = int(slash_match.group(1))
        day = int(slash_match.group(2))

    if month is None or day is None:
        return None

    start = datetime_from_local_date_str(timeline_start)
    year = start.year if month >= start.month else start.year + 1
    try:
        return pendulum.date(year, month, day).isoformat()
    except ValueError:
        return None


def import_timeline_rows(rows: Sequence[Sequence[str]]) -> ImportResult:
    """
    Replace all tasks and events with the contents of a timeline sheet.

    The first row holds the headers: category, task, then one week header per
    column. Blank rows and rows holding only a category are skipped. Every
    non-blank week cell becomes an event labelled with the cell text.
    """
    if len(rows) < 2:
        raise SheetImportError("Sheet appears to be empty or has no data rows")

    timeline_start = str(CONFIGURATION_REPO.get_config()["timeline_start"])

    headers = rows[0]
    week_columns: list[tuple[int, str]] = []
    for index in range(FIRST_WEEK_COLUMN, min(len(headers), LAST_WEEK_COLUMN + 1)):
        if not headers[index]:
            continue
        week_date = parse_date_header(headers[index], timeline_start)
        if week_date is not None:
            week_columns.append((index, week_date))
        else:
            logger.warning("skipping column %d with header %r", index, headers[index])
    logger.debug("parsed week columns: %s", week_columns)

    TASK_REPO.clear()
    EVENT_REPO.clear()

    task_count = 0
    event_count = 0
    for row in rows[1:]:
        category = (row[0] if len(row) > 0 else "").strip()
        task_name = (row[1] if len(row) > 1 else "").strip()

        if not category and not task_name:
            continue
        # Category header rows have no task
        if not task_name:
            continue

        task = get_task_template()
        task["category"] = category or UNCATEGORIZED
        task["task"] = task_name
        task["sort_order"] = task_count
        task_id = TASK_REPO.save_new_task(task)
        task_count += 1

        for index, week_date in week_columns:
            cell_value = (row[index] if index < len(row) else "").strip()
            if not cell_value:
                continue
            event = get_event_template()
            event["task_id"] = task_id
            event["week_date"] = week_date
            event["label"] = cell_value
            event["color"] = get_event_color(cell_value)
            EVENT_REPO.save_new_event(event)
            event_count += 1

    logger.info("imported %d tasks with %d events", task_count, event_count)
    return {
        "tasks": task_count,
        "events": event_count,
        "week_dates": [week_date for _, week_date in week_columns],
    }


def import_timeline_csv(path: Path) -> ImportResult:
    """Import a timeline sheet exported as CSV."""
    try:
        with path.open(newline="", encoding="utf-8") as csv_file:
            rows = list(csv.reader(csv_file))
    except OSError as e:
        raise SheetImportError(f"Could not read {path}: {e}") from e
    return import_timeline_rows(rows)
