# SPDX-License-Identifier: MIT

import pytest

from weekline import configuration
from weekline.exceptions import EventNotFoundError, TaskNotFoundError
from weekline.repository.configuration import CONFIGURATION_REPO
from weekline.repository.event import EVENT_REPO
from weekline.repository.task import TASK_REPO
from weekline.template.event import get_event_template
from weekline.template.task import get_task_template


def new_task(category, name):
    task = get_task_template()
    task["category"] = category
    task["task"] = name
    return task


class TestTaskRepository:
    def test_missing_file_is_empty(self):
        assert TASK_REPO.get_all_tasks() == []

    def test_flush_and_reload(self):
        id = TASK_REPO.save_new_task(new_task("IT", "Buy laptops"))

        assert TASK_REPO.flush() is True
        assert TASK_REPO.flush() is False
        TASK_REPO.invalidate()

        task = TASK_REPO.get_task(id)
        assert task["category"] == "IT"
        assert task["task"] == "Buy laptops"
        assert task["created"] == task["updated"]

    def test_ids_keep_increasing_after_delete(self):
        first_id = TASK_REPO.save_new_task(new_task("IT", "One"))
        TASK_REPO.delete_task(first_id)
        TASK_REPO.flush()
        TASK_REPO.invalidate()

        second_id = TASK_REPO.save_new_task(new_task("IT", "Two"))

        assert second_id == first_id + 1

    def test_reads_are_copies(self):
        id = TASK_REPO.save_new_task(new_task("IT", "Buy laptops"))

        TASK_REPO.get_task(id)["task"] = "Changed"

        assert TASK_REPO.get_task(id)["task"] == "Buy laptops"

    def test_modify_unknown_task(self):
        with pytest.raises(TaskNotFoundError):
            TASK_REPO.modify_task(42, task="Nope")


class TestEventRepository:
    def test_week_date_survives_reload(self):
        event = get_event_template()
        event["task_id"] = 1
        event["week_date"] = "2024-11-14"
        id = EVENT_REPO.save_new_event(event)
        EVENT_REPO.flush()
        EVENT_REPO.invalidate()

        assert EVENT_REPO.get_event(id)["week_date"] == "2024-11-14"

    def test_unquoted_yaml_date_is_read_as_string(self):
        configuration.DATA_EVENTS_PATH.write_text(
            "next_id: 2\n"
            "events:\n"
            "- id: 1\n"
            "  task_id: 1\n"
            "  week_date: 2024-11-14\n"
            "  label: Start\n"
            "  color: null\n"
            "  created: '2024-11-01T00:00:00+00:00'\n"
        )

        assert EVENT_REPO.get_event(1)["week_date"] == "2024-11-14"

    def test_find_event_at_returns_last_duplicate(self):
        for label in ("First", "Second"):
            event = get_event_template()
            event["task_id"] = 1
            event["week_date"] = "2024-11-14"
            event["label"] = label
            EVENT_REPO.save_new_event(event)

        assert EVENT_REPO.find_event_at(1, "2024-11-14")["label"] == "Second"
        assert EVENT_REPO.find_event_at(1, "2024-11-21") is None

    def test_delete_unknown_event(self):
        with pytest.raises(EventNotFoundError):
            EVENT_REPO.delete_event(42)


class TestConfigurationRepository:
    def test_defaults_without_file(self):
        config = CONFIGURATION_REPO.get_config()

        assert config["timeline_start"] == "2024-11-14"
        assert config["timeline_weeks"] == 26
        assert config["auto_color_events"] is True

    def test_missing_keys_are_filled(self):
        configuration.APP_CONFIG_PATH.write_text("show_header: false\n")

        config = CONFIGURATION_REPO.get_config()

        assert config["show_header"] is False
        assert config["column_width"] == 8

    def test_explicit_week_dates_win(self):
        CONFIGURATION_REPO.update_config(week_dates=["2024-01-08", "2024-01-01"])

        assert CONFIGURATION_REPO.get_week_dates() == ["2024-01-01", "2024-01-08"]

        CONFIGURATION_REPO.update_config(remove_week_dates=True)
        assert len(CONFIGURATION_REPO.get_week_dates()) == 26

    def test_flush_writes_file(self):
        CONFIGURATION_REPO.update_config(timeline_weeks=4, log_level="debug")
        CONFIGURATION_REPO.flush()
        CONFIGURATION_REPO.invalidate()

        config = CONFIGURATION_REPO.get_config()
        assert config["timeline_weeks"] == 4
        assert config["log_level"] == "DEBUG"
        assert CONFIGURATION_REPO.get_week_dates()[-1] == "2024-12-05"
