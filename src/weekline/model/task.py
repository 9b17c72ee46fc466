# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class Task(TypedDict):
    id: Optional[int]
    category: str
    task: str
    sort_order: int
    created: pendulum.DateTime
    updated: pendulum.DateTime
