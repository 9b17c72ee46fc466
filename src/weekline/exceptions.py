# SPDX-License-Identifier: MIT


class WeeklineError(Exception):
    """Base class for recoverable timeline errors shown to the user."""


class MissingFieldsError(WeeklineError):
    def __init__(self, *fields: str) -> None:
        self.fields = fields
        super().__init__(f"{' and '.join(fields)} are required")


class TaskNotFoundError(WeeklineError):
    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"No task found with id {task_id}")


class EventNotFoundError(WeeklineError):
    def __init__(self, event_id: int) -> None:
        self.event_id = event_id
        super().__init__(f"No event found with id {event_id}")


class SheetImportError(WeeklineError):
    pass
