# SPDX-License-Identifier: MIT

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from weekline.exceptions import MissingFieldsError
from weekline.model.task import Task
from weekline.repository.event import EVENT_REPO
from weekline.repository.task import TASK_REPO

logger = logging.getLogger(__name__)


def group_tasks_by_category(tasks: Iterable[Task]) -> dict[str, list[Task]]:
    """Group tasks by category, keeping the given task order inside each group."""
    categories: dict[str, list[Task]] = {}
    for task in tasks:
        categories.setdefault(task["category"], []).append(task)
    return categories


def sorted_categories(categories: Mapping[str, Any]) -> list[str]:
    """Return category names in ascending lexicographic order."""
    return sorted(categories.keys())


class CollapsedCategories:
    """
    Names of the categories currently collapsed in one viewing session.

    Owned by the caller and passed into rendering; toggling never touches
    task data and nothing here is persisted.
    """

    def __init__(self, collapsed: Iterable[str] = ()) -> None:
        self._collapsed: set[str] = set(collapsed)

    def toggle(self, category: str) -> bool:
        """Flip the collapsed state of a category.

        Returns:
            True if the category is collapsed after the toggle
        """
        if category in self._collapsed:
            self._collapsed.discard(category)
            return False
        self._collapsed.add(category)
        return True

    def is_collapsed(self, category: str) -> bool:
        return category in self._collapsed

    def snapshot(self) -> frozenset[str]:
        return frozenset(self._collapsed)

    def __contains__(self, category: object) -> bool:
        return category in self._collapsed

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._collapsed))

    def __len__(self) -> int:
        return len(self._collapsed)


def get_all_categories() -> list[str]:
    return sorted({task["category"] for task in TASK_REPO.get_all_tasks()})


def rename_category(old_category: str, new_category: str) -> int:
    """
    Rename a category by rewriting the category of every task that carries it.

    Returns:
        Number of tasks moved to the new name
    """
    new_category = new_category.strip()
    if not new_category:
        raise MissingFieldsError("new category name")

    renamed_count = TASK_REPO.rename_category(old_category, new_category)
    logger.info(
        "renamed category %r to %r on %d tasks",
        old_category,
        new_category,
        renamed_count,
    )
    return renamed_count


def delete_category(category: str) -> int:
    """
    Delete every task in a category together with the events on those tasks.

    Returns:
        Number of tasks deleted
    """
    category_tasks = [
        task for task in TASK_REPO.get_all_tasks() if task["category"] == category
    ]
    for task in category_tasks:
        assert task["id"] is not None
        EVENT_REPO.delete_events_for_task(task["id"])
        TASK_REPO.delete_task(task["id"])
    logger.info("deleted category %r with %d tasks", category, len(category_tasks))
    return len(category_tasks)
