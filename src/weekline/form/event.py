# SPDX-License-Identifier: MIT

from collections.abc import Callable
from typing import Optional, TypedDict

from weekline.color import DEFAULT_EVENT_COLOR, EVENT_PRESETS, find_preset
from weekline.model.event import Event


class EventFormData(TypedDict):
    label: str
    color: str


class EventForm:
    """
    Create/edit form for the event at one (task, week) cell.

    Either a built-in preset is selected (its label and color are fixed) or
    a custom label and color are typed in. selected_preset is None for the
    custom entry.
    """

    def __init__(
        self,
        on_save: Callable[[EventFormData], None],
        on_delete: Callable[[int], None],
        on_close: Callable[[], None],
    ) -> None:
        self._on_save = on_save
        self._on_delete = on_delete
        self._on_close = on_close

        self.is_open = False
        self.is_loading = False
        self.task_id: Optional[int] = None
        self.week_date = ""
        self.event: Optional[Event] = None
        self.selected_preset: Optional[str] = None
        self.custom_label = ""
        self.custom_color = DEFAULT_EVENT_COLOR

    def open(self, task_id: int, week_date: str, event: Optional[Event]) -> None:
        self.is_open = True
        self.is_loading = False
        self.task_id = task_id
        self.week_date = week_date
        self.event = event

        preset = find_preset(event["label"]) if event is not None else None
        if preset is not None:
            self.selected_preset = preset["label"]
            self.custom_label = ""
            self.custom_color = DEFAULT_EVENT_COLOR
        elif event is not None:
            self.selected_preset = None
            self.custom_label = event["label"] or ""
            self.custom_color = event["color"] or DEFAULT_EVENT_COLOR
        else:
            self.selected_preset = None
            self.custom_label = ""
            self.custom_color = DEFAULT_EVENT_COLOR

    @property
    def is_editing(self) -> bool:
        return self.event is not None

    @property
    def title(self) -> str:
        return "Edit Event" if self.is_editing else "Add Event"

    @property
    def preset_labels(self) -> list[str]:
        return [preset["label"] for preset in EVENT_PRESETS]

    @property
    def final_label(self) -> str:
        if self.selected_preset is not None:
            return self.selected_preset
        return self.custom_label.strip()

    @property
    def final_color(self) -> str:
        if self.selected_preset is not None:
            preset = find_preset(self.selected_preset)
            return preset["color"] if preset else DEFAULT_EVENT_COLOR
        return self.custom_color

    @property
    def can_save(self) -> bool:
        return not self.is_loading and bool(self.final_label)

    @property
    def can_delete(self) -> bool:
        return self.is_editing and not self.is_loading

    def select_preset(self, label: str) -> None:
        if self.is_loading:
            return
        if find_preset(label) is None:
            raise ValueError(f"unknown event preset {label!r}")
        self.selected_preset = label

    def select_custom(self) -> None:
        if self.is_loading:
            return
        self.selected_preset = None

    def set_custom_label(self, label: str) -> None:
        if self.is_loading:
            return
        self.custom_label = label

    def set_custom_color(self, color: str) -> None:
        if self.is_loading:
            return
        self.custom_color = color

    def save(self) -> bool:
        if not self.is_open or not self.can_save:
            return False
        self._on_save({"label": self.final_label, "color": self.final_color})
        return True

    def delete(self) -> bool:
        if not self.is_open or not self.can_delete or self.event is None:
            return False
        assert self.event["id"] is not None
        self._on_delete(self.event["id"])
        return True

    def cancel(self) -> bool:
        if self.is_loading:
            return False
        self.close()
        return True

    def close(self) -> None:
        self.is_open = False
        self.is_loading = False
        self._on_close()
