# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from weekline.color import CHART_COLORS, DEFAULT_EVENT_COLOR
from weekline.model.event import Event
from weekline.model.summary import (
    CategoryBreakdown,
    EventTypeCount,
    Milestone,
    TimelineSummary,
    WeekActivity,
)
from weekline.model.task import Task
from weekline.model.timeline import TimelineData
from weekline.time import (
    date_from_local_date_str,
    days_between,
    format_header,
    now_local,
    week_status,
)

MILESTONE_WINDOW_DAYS = 14
MILESTONE_LIMIT = 5
EVENT_TYPE_LIMIT = 8
OTHER_EVENT_TYPE = "Other"
UNKNOWN = "Unknown"


def _milestone(
    event: Event, tasks_by_id: dict[int, Task], date_label: str
) -> Milestone:
    task = tasks_by_id.get(event["task_id"])
    return {
        "task": task["task"] if task else UNKNOWN,
        "category": task["category"] if task else UNKNOWN,
        "event": event,
        "date_label": date_label,
    }


def _days_until_label(days: int) -> str:
    if days == 0:
        return "Today"
    if days == 1:
        return "Tomorrow"
    return f"In {days} days"


def _days_ago_label(days: int) -> str:
    if days == 0:
        return "Today"
    if days == 1:
        return "Yesterday"
    return f"{days} days ago"


def _progress_percent(week_dates: list[str], today: pendulum.Date) -> int:
    if not week_dates:
        return 0
    first = date_from_local_date_str(week_dates[0])
    last = date_from_local_date_str(week_dates[-1])
    total_days = days_between(first, last)
    if total_days <= 0:
        return 0
    elapsed_days = max(0, days_between(first, min(today, last)))
    # Rounds half up
    return min(100, (elapsed_days * 200 + total_days) // (total_days * 2))


def _category_breakdown(data: TimelineData) -> list[CategoryBreakdown]:
    breakdown: list[CategoryBreakdown] = []
    for index, (category, category_tasks) in enumerate(data["categories"].items()):
        event_count = sum(
            len(data["events_by_task"].get(task["id"] or 0, []))
            for task in category_tasks
        )
        breakdown.append(
            {
                "name": category,
                "tasks": len(category_tasks),
                "events": event_count,
                "color": CHART_COLORS[index % len(CHART_COLORS)],
            }
        )
    return sorted(breakdown, key=lambda row: row["events"], reverse=True)


def _event_type_breakdown(events: list[Event]) -> list[EventTypeCount]:
    counts: dict[str, EventTypeCount] = {}
    for event in events:
        name = event["label"] or OTHER_EVENT_TYPE
        if name not in counts:
            counts[name] = {
                "name": name,
                "count": 0,
                "color": event["color"] or DEFAULT_EVENT_COLOR,
            }
        counts[name]["count"] += 1
    ranked = sorted(counts.values(), key=lambda row: row["count"], reverse=True)
    return ranked[:EVENT_TYPE_LIMIT]


def _weekly_activity(data: TimelineData) -> list[WeekActivity]:
    events_per_week: dict[str, int] = {}
    for event in data["events"]:
        events_per_week[event["week_date"]] = (
            events_per_week.get(event["week_date"], 0) + 1
        )
    return [
        {
            "week_date": week_date,
            "label": format_header(week_date),
            "events": events_per_week.get(week_date, 0),
        }
        for week_date in data["week_dates"]
    ]


def summarize_timeline(
    data: TimelineData, now: Optional[pendulum.DateTime] = None
) -> TimelineSummary:
    """
    Compute the overview shown above the timeline grid.

    While the project runs, milestones are the events within two weeks
    ahead of and behind today. Once the last week date has passed, upcoming
    milestones become the five latest events and recent milestones the five
    before them.

    Args:
        data: Timeline snapshot from get_timeline_data
        now: Moment the overview is computed for (defaults to now)
    """
    if now is None:
        now = now_local()
    today = now.in_tz("local").date()

    week_dates = data["week_dates"]
    events = data["events"]
    tasks_by_id = {task["id"]: task for task in data["tasks"] if task["id"]}

    is_project_complete = bool(week_dates) and today > date_from_local_date_str(
        week_dates[-1]
    )

    completed_events = 0
    this_week_events = 0
    upcoming_events = 0
    for event in events:
        status = week_status(event["week_date"], now)
        if status == "past":
            completed_events += 1
        elif status == "current":
            this_week_events += 1
        else:
            upcoming_events += 1

    latest_first = sorted(events, key=lambda event: event["week_date"], reverse=True)
    upcoming_milestones: list[Milestone] = []
    recent_milestones: list[Milestone] = []
    if is_project_complete:
        upcoming_milestones = [
            _milestone(event, tasks_by_id, format_header(event["week_date"]))
            for event in latest_first[:MILESTONE_LIMIT]
        ]
        recent_milestones = [
            _milestone(event, tasks_by_id, format_header(event["week_date"]))
            for event in latest_first[MILESTONE_LIMIT : MILESTONE_LIMIT * 2]
        ]
        if not recent_milestones:
            recent_milestones = list(upcoming_milestones)
    else:
        ahead: list[tuple[int, Event]] = []
        behind: list[tuple[int, Event]] = []
        for event in events:
            days = days_between(today, date_from_local_date_str(event["week_date"]))
            if 0 <= days <= MILESTONE_WINDOW_DAYS:
                ahead.append((days, event))
            elif -MILESTONE_WINDOW_DAYS <= days < 0:
                behind.append((-days, event))
        ahead.sort(key=lambda item: item[0])
        behind.sort(key=lambda item: item[0])
        upcoming_milestones = [
            _milestone(event, tasks_by_id, _days_until_label(days))
            for days, event in ahead[:MILESTONE_LIMIT]
        ]
        recent_milestones = [
            _milestone(event, tasks_by_id, _days_ago_label(days))
            for days, event in behind[:MILESTONE_LIMIT]
        ]

    if week_dates:
        timespan = f"{format_header(week_dates[0])} - {format_header(week_dates[-1])}"
    else:
        timespan = "No dates"

    return {
        "total_tasks": len(data["tasks"]),
        "total_events": len(events),
        "total_categories": len(data["categories"]),
        "timespan": timespan,
        "completed_events": completed_events,
        "this_week_events": this_week_events,
        "upcoming_events": upcoming_events,
        "progress_percent": _progress_percent(week_dates, today),
        "is_project_complete": is_project_complete,
        "category_breakdown": _category_breakdown(data),
        "upcoming_milestones": upcoming_milestones,
        "recent_milestones": recent_milestones,
        "event_type_breakdown": _event_type_breakdown(events),
        "weekly_activity": _weekly_activity(data),
    }
