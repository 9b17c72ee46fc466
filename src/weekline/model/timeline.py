# SPDX-License-Identifier: MIT

from typing import TypedDict

from weekline.model.event import Event
from weekline.model.task import Task


class TimelineData(TypedDict):
    tasks: list[Task]
    events: list[Event]
    events_by_task: dict[int, list[Event]]
    categories: dict[str, list[Task]]
    week_dates: list[str]
    last_updated: str
