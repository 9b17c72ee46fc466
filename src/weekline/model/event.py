# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class Event(TypedDict):
    """
    A single-week marker on a task.

    week_date is the ISO date ('YYYY-MM-DD') of the week column the event
    sits in and acts as the column key together with task_id.
    """

    id: Optional[int]
    task_id: int
    week_date: str
    label: Optional[str]
    color: Optional[str]
    created: pendulum.DateTime
