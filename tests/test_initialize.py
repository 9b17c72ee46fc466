# SPDX-License-Identifier: MIT

import logging

from rich.logging import RichHandler
from yaml import safe_load

from weekline import configuration
from weekline.cleanup import flush_and_sync
from weekline.initialize import initialize
from weekline.logger import LOGGER_NAME, configure_logging
from weekline.repository.task import TASK_REPO
from weekline.service import timeline as timeline_service
from weekline.view import state as view_state


def test_initialize_creates_files():
    initialize()

    assert safe_load(configuration.APP_CONFIG_PATH.read_text())["timeline_weeks"] == 26
    assert safe_load(configuration.DATA_TASKS_PATH.read_text()) == {
        "next_id": 1,
        "tasks": [],
    }
    assert safe_load(configuration.DATA_EVENTS_PATH.read_text()) == {
        "next_id": 1,
        "events": [],
    }


def test_initialize_applies_show_header():
    configuration.APP_CONFIG_PATH.write_text("show_header: false\n")

    initialize()

    assert view_state.get_show_header() is False


def test_initialize_follows_configured_data_path(tmp_path):
    elsewhere = tmp_path / "elsewhere"
    configuration.APP_CONFIG_PATH.write_text(f"data_path: {elsewhere}\n")

    initialize()

    assert configuration.DATA_PATH == elsewhere
    assert (elsewhere / "tasks.yaml").is_file()


def test_flush_and_sync_persists_changes():
    initialize()
    timeline_service.create_task("IT", "Buy laptops")

    flush_and_sync()
    TASK_REPO.invalidate()

    assert [task["task"] for task in TASK_REPO.get_all_tasks()] == ["Buy laptops"]


def test_configure_logging_installs_one_handler():
    configure_logging("info")
    configure_logging("debug")

    logger = logging.getLogger(LOGGER_NAME)
    handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
    assert len(handlers) == 1
    assert logger.level == logging.DEBUG
