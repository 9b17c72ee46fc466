# SPDX-License-Identifier: MIT

import logging
from collections.abc import Awaitable, Callable
from typing import TypeAlias, Optional

from weekline.model.timeline import TimelineData
from weekline.service.timeline import get_timeline_data
from weekline.template.timeline import get_timeline_template

logger = logging.getLogger(__name__)

TimelineFetch: TypeAlias = Callable[[], Awaitable[TimelineData]]


async def fetch_timeline_data() -> TimelineData:
    return get_timeline_data()


class TimelineLoader:
    """
    Holds the timeline snapshot shown by one view and applies refreshes.

    Only the most recently started refresh may replace the snapshot: a
    refresh that completes after a newer one has started is discarded, so
    out-of-order completions never bring stale data back. A failed refresh
    leaves the snapshot untouched and records the error for the host.
    Retrying is left to the caller.
    """

    def __init__(self, initial: Optional[TimelineData] = None) -> None:
        self._data: TimelineData = (
            initial if initial is not None else get_timeline_template()
        )
        self._generation = 0
        self._pending = 0
        self.error: Optional[str] = None

    @property
    def data(self) -> TimelineData:
        return self._data

    @property
    def is_loading(self) -> bool:
        return self._pending > 0

    async def refresh(self, fetch: TimelineFetch = fetch_timeline_data) -> bool:
        """
        Fetch a new snapshot and apply it if no newer refresh has started.

        Returns:
            True if the fetched snapshot was applied
        """
        self._generation += 1
        generation = self._generation

        self._pending += 1
        try:
            data = await fetch()
        except Exception as e:
            if generation == self._generation:
                self.error = str(e) or type(e).__name__
            logger.warning("timeline refresh %d failed: %s", generation, e)
            return False
        finally:
            self._pending -= 1

        if generation != self._generation:
            logger.debug(
                "discarding refresh %d, refresh %d is newer",
                generation,
                self._generation,
            )
            return False

        self._data = data
        self.error = None
        return True
