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
from weekline.exceptions import TaskNotFoundError
from weekline.model.task import Task

logger = logging.getLogger(__name__)


class TaskRepository:
    def __init__(self) -> None:
        self._tasks: Optional[list[Task]] = None
        self._next_id = 1
        self.is_dirty = False

    @property
    def tasks(self) -> list[Task]:
        if self._tasks is None:
            self.__load_data()
        if self._tasks is None:
            raise ValueError()
        return self._tasks

    def __load_data(self) -> None:
        self._tasks = []
        self._next_id = 1
        if not configuration.DATA_TASKS_PATH.is_file():
            return
        tasks_data = load(configuration.DATA_TASKS_PATH.read_text(), Loader=Loader)
        if tasks_data is None:
            return
        self._next_id = tasks_data.get("next_id", 1)
        for raw_task in tasks_data.get("tasks") or []:
            self._tasks.append(self.__convert_task_for_deserialization(raw_task))

    def __save_data(self) -> None:
        tasks_data: dict[str, Any] = {
            "next_id": self._next_id,
            "tasks": [
                self.__convert_task_for_serialization(deepcopy(task))
                for task in self.tasks
            ],
        }
        configuration.DATA_TASKS_PATH.write_text(dump(tasks_data, Dumper=Dumper))
        logger.debug(
            "wrote %d tasks to %s", len(self.tasks), configuration.DATA_TASKS_PATH
        )

    def flush(self) -> bool:
        if self._tasks is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def invalidate(self) -> None:
        """Drop cached rows so the next read comes from disk."""
        self._tasks = None
        self.is_dirty = False

    def __convert_task_for_serialization(self, task: Task) -> dict[str, Any]:
        serializable_task = cast(dict[str, Any], task)
        serializable_task["created"] = time.datetime_to_iso_str(
            serializable_task["created"]
        )
        serializable_task["updated"] = time.datetime_to_iso_str(
            serializable_task["updated"]
        )
        return serializable_task

    def __convert_task_for_deserialization(self, task: dict[str, Any]) -> Task:
        deserializable_task = task
        deserializable_task["created"] = time.datetime_from_str(
            deserializable_task["created"]
        )
        deserializable_task["updated"] = time.datetime_from_str(
            deserializable_task["updated"]
        )
        if deserializable_task.get("sort_order") is None:
            deserializable_task["sort_order"] = 0
        return cast(Task, deserializable_task)

    def __find_task(self, id: int) -> Task:
        for task in self.tasks:
            if task["id"] == id:
                return task
        raise TaskNotFoundError(id)

    def save_new_task(self, task: Task) -> int:
        # Load before allocating so _next_id reflects the file
        tasks = self.tasks
        self.is_dirty = True

        task["id"] = self._next_id
        self._next_id += 1
        tasks.append(task)

        return task["id"]

    def modify_task(
        self,
        id: int,
        category: Optional[str] = None,
        task: Optional[str] = None,
        sort_order: Optional[int] = None,
    ) -> None:
        existing_task = self.__find_task(id)
        self.is_dirty = True

        # Set updated timestamp to current moment
        existing_task["updated"] = time.now_utc()
        if category is not None:
            existing_task["category"] = category
        if task is not None:
            existing_task["task"] = task
        if sort_order is not None:
            existing_task["sort_order"] = sort_order

    def delete_task(self, id: int) -> Task:
        deleted_task = self.__find_task(id)
        self.is_dirty = True
        self._tasks = [task for task in self.tasks if task["id"] != id]
        return deepcopy(deleted_task)

    def rename_category(self, old_category: str, new_category: str) -> int:
        """Rewrite the category of every task carrying old_category.

        Returns:
            Number of tasks renamed
        """
        renamed_count = 0
        now = time.now_utc()
        for task in self.tasks:
            if task["category"] == old_category:
                task["category"] = new_category
                task["updated"] = now
                renamed_count += 1
        if renamed_count > 0:
            self.is_dirty = True
        return renamed_count

    def clear(self) -> int:
        """Permanently remove all tasks. Ids keep increasing afterwards.

        Returns:
            Number of tasks deleted
        """
        deleted_count = len(self.tasks)
        self.is_dirty = True
        self._tasks = []
        return deleted_count

    def task_exists(self, id: int) -> bool:
        return any(task["id"] == id for task in self.tasks)

    def get_all_tasks(self) -> list[Task]:
        return deepcopy(self.tasks)

    def get_task(self, id: int) -> Task:
        return deepcopy(self.__find_task(id))


TASK_REPO = TaskRepository()
