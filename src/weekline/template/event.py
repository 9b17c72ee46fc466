# SPDX-License-Identifier: MIT

from weekline.model.event import Event
from weekline.time import now_utc


def get_event_template() -> Event:
    return {
        "id": None,
        "task_id": 0,
        "week_date": "",
        "label": None,
        "color": None,
        "created": now_utc(),
    }
