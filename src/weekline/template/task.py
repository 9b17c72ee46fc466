# SPDX-License-Identifier: MIT

from weekline.model.task import Task
from weekline.time import now_utc


def get_task_template() -> Task:
    now = now_utc()
    return {
        "id": None,
        "category": "",
        "task": "",
        "sort_order": 0,
        "created": now,
        "updated": now,
    }
