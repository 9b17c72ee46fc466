# SPDX-License-Identifier: MIT

from collections.abc import Iterable, Iterator
from typing import TypeAlias, Optional

from weekline.model.event import Event

EventKey: TypeAlias = tuple[int, str]


class EventIndex:
    """
    Lookup of the event displayed at each (task_id, week_date) cell.

    Built once from a flat event list in iteration order. When two events
    share a key the later one overwrites the earlier one without error, so
    a source holding duplicates shows its last event for that cell.
    """

    def __init__(self, events: Iterable[Event]) -> None:
        lookup: dict[EventKey, Event] = {}
        for event in events:
            lookup[(event["task_id"], event["week_date"])] = event
        self._lookup = lookup

    def get(self, task_id: int, week_date: str) -> Optional[Event]:
        return self._lookup.get((task_id, week_date))

    def __contains__(self, key: object) -> bool:
        return key in self._lookup

    def __len__(self) -> int:
        return len(self._lookup)

    def __iter__(self) -> Iterator[EventKey]:
        return iter(self._lookup)


class EventIndexCache:
    """Memoizes an EventIndex on the identity of the source event list.

    A new list object rebuilds the index; the same list object returns the
    cached index. Lists are never mutated in place by callers, a refresh
    always brings a new list.
    """

    def __init__(self) -> None:
        self._source: Optional[list[Event]] = None
        self._index: Optional[EventIndex] = None

    def index_for(self, events: list[Event]) -> EventIndex:
        if self._index is None or events is not self._source:
            self._index = EventIndex(events)
            self._source = events
        return self._index
