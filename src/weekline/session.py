# SPDX-License-Identifier: MIT

import logging
from collections.abc import Sequence
from typing import Any, Optional

import pendulum

from weekline.exceptions import WeeklineError
from weekline.form.event import EventForm, EventFormData
from weekline.form.task import TaskForm, TaskFormData
from weekline.model.event import Event
from weekline.model.task import Task
from weekline.service import timeline as timeline_service
from weekline.service.category import CollapsedCategories, sorted_categories
from weekline.service.loader import TimelineFetch, TimelineLoader, fetch_timeline_data
from weekline.view.grid import TimelineChart, TimelineGrid

logger = logging.getLogger(__name__)


class TimelineSession:
    """
    Host for one timeline view: data, collapse state, chart and forms.

    Persistence goes through store, which defaults to the timeline service
    module and needs create_task, update_task, delete_task, set_cell_event
    and delete_event. A successful save or delete closes its form and marks
    the session stale; the caller then awaits refresh(). A failed one keeps
    the form open with its input and records the message in error.
    """

    def __init__(
        self,
        fetch: TimelineFetch = fetch_timeline_data,
        store: Any = timeline_service,
        default_categories: Optional[Sequence[str]] = None,
        lead_columns: int = 2,
    ) -> None:
        self._fetch = fetch
        self._store = store
        self.loader = TimelineLoader()
        self.collapsed = CollapsedCategories()
        self.chart = TimelineChart(
            on_cell_click=self.open_event_form,
            on_task_click=self.open_task_form,
            on_category_toggle=self.toggle_category,
            lead_columns=lead_columns,
        )
        self.task_form = TaskForm(
            on_save=self._save_task,
            on_delete=self._delete_task,
            on_close=self._clear_error,
            default_categories=default_categories,
        )
        self.event_form = EventForm(
            on_save=self._save_event,
            on_delete=self._delete_event,
            on_close=self._clear_error,
        )
        self.error: Optional[str] = None
        self.is_stale = True

    async def refresh(self) -> bool:
        applied = await self.loader.refresh(self._fetch)
        if applied:
            self.is_stale = False
        return applied

    def render(self, now: Optional[pendulum.DateTime] = None) -> TimelineGrid:
        data = self.loader.data
        return self.chart.render(
            data["categories"],
            data["events"],
            data["week_dates"],
            self.collapsed,
            now,
        )

    def toggle_category(self, category: str) -> None:
        self.collapsed.toggle(category)

    def click_cell(self, task_id: int, week_date: str) -> None:
        self.chart.click_cell(task_id, week_date, self.loader.data["events"])

    def open_task_form(self, task: Optional[Task] = None) -> None:
        self.error = None
        self.task_form.open(task, sorted_categories(self.loader.data["categories"]))

    def open_event_form(
        self, task_id: int, week_date: str, event: Optional[Event]
    ) -> None:
        self.error = None
        self.event_form.open(task_id, week_date, event)

    def _clear_error(self) -> None:
        self.error = None

    def _persist(self, form: TaskForm | EventForm, action: str, *args: Any) -> None:
        form.is_loading = True
        try:
            getattr(self._store, action)(*args)
        except WeeklineError as e:
            self.error = str(e)
            logger.warning("%s failed: %s", action, e)
            return
        except Exception as e:
            # Storage failures leave the form open for a retry or cancel
            self.error = str(e) or type(e).__name__
            logger.exception("%s failed", action)
            return
        finally:
            form.is_loading = False
        form.close()
        self.is_stale = True

    def _save_task(self, data: TaskFormData) -> None:
        task = self.task_form.task
        if task is None:
            self._persist(self.task_form, "create_task", data["category"], data["task"])
        else:
            self._persist(
                self.task_form, "update_task", task["id"], data["category"], data["task"]
            )

    def _delete_task(self, task_id: int) -> None:
        self._persist(self.task_form, "delete_task", task_id)

    def _save_event(self, data: EventFormData) -> None:
        self._persist(
            self.event_form,
            "set_cell_event",
            self.event_form.task_id,
            self.event_form.week_date,
            data["label"],
            data["color"],
        )

    def _delete_event(self, event_id: int) -> None:
        self._persist(self.event_form, "delete_event", event_id)
