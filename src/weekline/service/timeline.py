# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from weekline import time
from weekline.color import get_event_color
from weekline.exceptions import MissingFieldsError, TaskNotFoundError
from weekline.model.event import Event
from weekline.model.task import Task
from weekline.model.timeline import TimelineData
from weekline.repository.configuration import CONFIGURATION_REPO
from weekline.repository.event import EVENT_REPO
from weekline.repository.task import TASK_REPO
from weekline.service.category import group_tasks_by_category
from weekline.template.event import get_event_template
from weekline.template.task import get_task_template

logger = logging.getLogger(__name__)


def get_timeline_data() -> TimelineData:
    """
    Collect everything the timeline needs in one snapshot.

    Tasks are ordered by category then sort order, events by week date.
    Every call returns new lists, so consumers can memoize on identity.
    """
    tasks = sorted(
        TASK_REPO.get_all_tasks(),
        key=lambda task: (task["category"], task["sort_order"], task["id"] or 0),
    )
    events = sorted(EVENT_REPO.get_all_events(), key=lambda event: event["week_date"])

    events_by_task: dict[int, list[Event]] = {}
    for event in events:
        events_by_task.setdefault(event["task_id"], []).append(event)

    return {
        "tasks": tasks,
        "events": events,
        "events_by_task": events_by_task,
        "categories": group_tasks_by_category(tasks),
        "week_dates": CONFIGURATION_REPO.get_week_dates(),
        "last_updated": time.datetime_to_iso_str(time.now_utc()),
    }


def create_task(category: str, task: str, sort_order: int = 0) -> Task:
    category = category.strip()
    task = task.strip()
    if not category or not task:
        raise MissingFieldsError("category", "task")

    new_task = get_task_template()
    new_task["category"] = category
    new_task["task"] = task
    new_task["sort_order"] = sort_order

    id = TASK_REPO.save_new_task(new_task)
    logger.info("created task %d %r in %r", id, task, category)
    return TASK_REPO.get_task(id)


def update_task(
    id: int,
    category: Optional[str] = None,
    task: Optional[str] = None,
    sort_order: Optional[int] = None,
) -> Task:
    if category is not None:
        category = category.strip()
        if not category:
            raise MissingFieldsError("category")
    if task is not None:
        task = task.strip()
        if not task:
            raise MissingFieldsError("task")

    TASK_REPO.modify_task(id, category=category, task=task, sort_order=sort_order)
    logger.info("updated task %d", id)
    return TASK_REPO.get_task(id)


def delete_task(id: int) -> Task:
    """Delete a task and, first, every event attached to it."""
    if not TASK_REPO.task_exists(id):
        raise TaskNotFoundError(id)
    deleted_events = EVENT_REPO.delete_events_for_task(id)
    deleted_task = TASK_REPO.delete_task(id)
    logger.info("deleted task %d and %d events", id, deleted_events)
    return deleted_task


def _resolve_event_color(label: Optional[str], color: Optional[str]) -> Optional[str]:
    if color:
        return color
    if CONFIGURATION_REPO.get_config()["auto_color_events"]:
        return get_event_color(label)
    return None


def create_event(
    task_id: int,
    week_date: str,
    label: Optional[str] = None,
    color: Optional[str] = None,
) -> Event:
    if not task_id or not week_date:
        raise MissingFieldsError("task_id", "week_date")
    if not TASK_REPO.task_exists(task_id):
        raise TaskNotFoundError(task_id)

    event = get_event_template()
    event["task_id"] = task_id
    event["week_date"] = week_date
    event["label"] = label
    event["color"] = _resolve_event_color(label, color)

    id = EVENT_REPO.save_new_event(event)
    logger.info("created event %d on task %d at %s", id, task_id, week_date)
    return EVENT_REPO.get_event(id)


def update_event(
    id: int,
    week_date: Optional[str] = None,
    label: Optional[str] = None,
    color: Optional[str] = None,
) -> Event:
    # A relabelled event without an explicit color is recolored from its label
    if label is not None:
        color = _resolve_event_color(label, color)
    EVENT_REPO.modify_event(id, week_date=week_date, label=label, color=color)
    logger.info("updated event %d", id)
    return EVENT_REPO.get_event(id)


def delete_event(id: int) -> Event:
    deleted_event = EVENT_REPO.delete_event(id)
    logger.info("deleted event %d", id)
    return deleted_event


def set_cell_event(
    task_id: int,
    week_date: str,
    label: Optional[str],
    color: Optional[str] = None,
) -> Event:
    """Create the event at a (task, week) cell, or update the one shown there."""
    existing_event = EVENT_REPO.find_event_at(task_id, week_date)
    if existing_event is None:
        return create_event(task_id, week_date, label, color)
    assert existing_event["id"] is not None
    return update_event(existing_event["id"], label=label, color=color)


def clear_cell_event(task_id: int, week_date: str) -> Optional[Event]:
    existing_event = EVENT_REPO.find_event_at(task_id, week_date)
    if existing_event is None:
        return None
    assert existing_event["id"] is not None
    return delete_event(existing_event["id"])
