# SPDX-License-Identifier: MIT

from typing import TypedDict

from weekline.model.event import Event


class CategoryBreakdown(TypedDict):
    name: str
    tasks: int
    events: int
    color: str


class Milestone(TypedDict):
    task: str
    category: str
    event: Event
    date_label: str


class EventTypeCount(TypedDict):
    name: str
    count: int
    color: str


class WeekActivity(TypedDict):
    week_date: str
    label: str
    events: int


class TimelineSummary(TypedDict):
    """
    Overview of one timeline snapshot at a given moment.

    Events count as completed, this week or upcoming by the status of their
    week column, so the three counts always add up to total_events.
    """

    total_tasks: int
    total_events: int
    total_categories: int
    timespan: str
    completed_events: int
    this_week_events: int
    upcoming_events: int
    progress_percent: int
    is_project_complete: bool
    category_breakdown: list[CategoryBreakdown]
    upcoming_milestones: list[Milestone]
    recent_milestones: list[Milestone]
    event_type_breakdown: list[EventTypeCount]
    weekly_activity: list[WeekActivity]
