# SPDX-License-Identifier: MIT

from collections.abc import Callable, Sequence
from typing import TypeAlias, Literal, Optional, TypedDict

from weekline.model.task import Task

FormMode: TypeAlias = Literal["create", "edit"]

# Offered when the timeline has no categories yet; never saved on their own
DEFAULT_CATEGORIES = [
    "10th Floor + Lobby Design",
    "Branding",
    "China",
    "Construction - High Rise",
    "Construction - Low Rise",
    "FINISHES",
    "Finishes & Misc",
    "Hiring",
    "IT",
    "Mechanical Systems",
    "OPENING",
    "PR & Social Media",
    "Website & Digital Performance",
]


class TaskFormData(TypedDict):
    category: str
    task: str


class TaskForm:
    """
    Create/edit form for a single task.

    The mode is chosen when the form opens: edit when a task is supplied,
    create otherwise. The form only emits intents. The host persists them,
    closes the form on success, and leaves it open on failure so the input
    survives a retry. While is_loading is set every control is disabled.
    """

    def __init__(
        self,
        on_save: Callable[[TaskFormData], None],
        on_delete: Callable[[int], None],
        on_close: Callable[[], None],
        default_categories: Optional[Sequence[str]] = None,
    ) -> None:
        self._on_save = on_save
        self._on_delete = on_delete
        self._on_close = on_close
        self._default_categories = list(
            default_categories if default_categories else DEFAULT_CATEGORIES
        )

        self.is_open = False
        self.is_loading = False
        self.task: Optional[Task] = None
        self.categories: list[str] = []
        self.category = ""
        self.task_name = ""
        self.is_new_category = False
        self.new_category = ""

    def open(self, task: Optional[Task], categories: Sequence[str]) -> None:
        self.is_open = True
        self.is_loading = False
        self.task = task
        self.categories = list(categories)
        if task is not None:
            self.category = task["category"]
            self.task_name = task["task"]
        else:
            self.category = ""
            self.task_name = ""
        self.is_new_category = False
        self.new_category = ""

    @property
    def mode(self) -> FormMode:
        return "edit" if self.task is not None else "create"

    @property
    def title(self) -> str:
        return "Edit Task" if self.mode == "edit" else "Add Task"

    @property
    def save_label(self) -> str:
        return "Update" if self.mode == "edit" else "Create"

    @property
    def can_delete(self) -> bool:
        return self.mode == "edit" and not self.is_loading

    @property
    def available_categories(self) -> list[str]:
        if self.categories:
            return self.categories
        return self._default_categories

    @property
    def resolved_category(self) -> str:
        if self.is_new_category:
            return self.new_category.strip()
        return self.category

    @property
    def can_save(self) -> bool:
        return (
            not self.is_loading
            and bool(self.task_name.strip())
            and bool(self.resolved_category)
        )

    def select_category(self, category: str) -> None:
        if self.is_loading:
            return
        self.category = category

    def start_new_category(self) -> None:
        if self.is_loading:
            return
        self.is_new_category = True

    def cancel_new_category(self) -> None:
        if self.is_loading:
            return
        self.is_new_category = False
        self.new_category = ""

    def set_new_category(self, new_category: str) -> None:
        if self.is_loading:
            return
        self.new_category = new_category

    def set_task_name(self, task_name: str) -> None:
        if self.is_loading:
            return
        self.task_name = task_name

    def save(self) -> bool:
        """Emit the save intent.

        Returns:
            False when the form is not savable and nothing was emitted
        """
        if not self.is_open or not self.can_save:
            return False
        self._on_save(
            {"category": self.resolved_category, "task": self.task_name.strip()}
        )
        return True

    def delete(self) -> bool:
        if not self.is_open or not self.can_delete or self.task is None:
            return False
        assert self.task["id"] is not None
        self._on_delete(self.task["id"])
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
