# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from weekline import configuration, time
from weekline.exceptions import EventNotFoundError
from weekline.model.event import Event

logger = logging.getLogger(__name__)


class EventRepository:
    def __init__(self) -> None:
        self._events: Optional[list[Event]] = None
        self._next_id = 1
        self.is_dirty = False

    @property
    def events(self) -> list[Event]:
        if self._events is None:
            self.__load_data()
        if self._events is None:
            raise ValueError()
        return self._events

    def __load_data(self) -> None:
        self._events = []
        self._next_id = 1
        if not configuration.DATA_EVENTS_PATH.is_file():
            return
        events_data = load(configuration.DATA_EVENTS_PATH.read_text(), Loader=Loader)
        if events_data is None:
            return
        self._next_id = events_data.get("next_id", 1)
        for raw_event in events_data.get("events") or []:
            self._events.append(self.__convert_event_for_deserialization(raw_event))

    def __save_data(self) -> None:
        events_data: dict[str, Any] = {
            "next_id": self._next_id,
            "events": [
                self.__convert_event_for_serialization(deepcopy(event))
                for event in self.events
            ],
        }
        configuration.DATA_EVENTS_PATH.write_text(dump(events_data, Dumper=Dumper))
        logger.debug(
            "wrote %d events to %s", len(self.events), configuration.DATA_EVENTS_PATH
        )

    def flush(self) -> bool:
        if self._events is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def invalidate(self) -> None:
        """Drop cached rows so the next read comes from disk."""
        self._events = None
        self.is_dirty = False

    def __convert_event_for_serialization(self, event: Event) -> dict[str, Any]:
        serializable_event = cast(dict[str, Any], event)
        serializable_event["created"] = time.datetime_to_iso_str(
            serializable_event["created"]
        )
        return serializable_event

    def __convert_event_for_deserialization(self, event: dict[str, Any]) -> Event:
        deserializable_event = event
        deserializable_event["created"] = time.datetime_from_str(
            deserializable_event["created"]
        )
        # Older files may carry the week date as a YAML date
        deserializable_event["week_date"] = str(deserializable_event["week_date"])
        return cast(Event, deserializable_event)

    def __find_event(self, id: int) -> Event:
        for event in self.events:
            if event["id"] == id:
                return event
        raise EventNotFoundError(id)

    def save_new_event(self, event: Event) -> int:
        events = self.events
        self.is_dirty = True

        event["id"] = self._next_id
        self._next_id += 1
        events.append(event)

        return event["id"]

    def modify_event(
        self,
        id: int,
        week_date: Optional[str] = None,
        label: Optional[str] = None,
        color: Optional[str] = None,
        remove_label: bool = False,
        remove_color: bool = False,
    ) -> None:
        event = self.__find_event(id)
        self.is_dirty = True

        if week_date is not None:
            event["week_date"] = week_date
        if label is not None:
            event["label"] = label
        if color is not None:
            event["color"] = color

        if remove_label:
            event["label"] = None
        if remove_color:
            event["color"] = None

    def delete_event(self, id: int) -> Event:
        deleted_event = self.__find_event(id)
        self.is_dirty = True
        self._events = [event for event in self.events if event["id"] != id]
        return deepcopy(deleted_event)

    def delete_events_for_task(self, task_id: int) -> int:
        """Permanently remove every event attached to a task.

        Returns:
            Number of events deleted
        """
        initial_count = len(self.events)
        self._events = [event for event in self.events if event["task_id"] != task_id]
        deleted_count = initial_count - len(self.events)
        if deleted_count > 0:
            self.is_dirty = True
        return deleted_count

    def clear(self) -> int:
        deleted_count = len(self.events)
        self.is_dirty = True
        self._events = []
        return deleted_count

    def get_all_events(self) -> list[Event]:
        return deepcopy(self.events)

    def get_event(self, id: int) -> Event:
        return deepcopy(self.__find_event(id))

    def find_event_at(self, task_id: int, week_date: str) -> Optional[Event]:
        """Find the event shown at a (task, week) cell.

        When the store holds duplicates for the cell, the last stored one is
        returned, matching what the timeline displays.
        """
        matching_events = [
            event
            for event in self.events
            if event["task_id"] == task_id and event["week_date"] == week_date
        ]
        if len(matching_events) == 0:
            return None
        return deepcopy(matching_events[-1])


EVENT_REPO = EventRepository()
