# SPDX-License-Identifier: MIT

from weekline.model.timeline import TimelineData


def get_timeline_template() -> TimelineData:
    return {
        "tasks": [],
        "events": [],
        "events_by_task": {},
        "categories": {},
        "week_dates": [],
        "last_updated": "",
    }
