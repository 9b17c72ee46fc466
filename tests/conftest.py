# SPDX-License-Identifier: MIT

import logging
from collections.abc import Iterator
from typing import Optional

import pendulum
import pytest

from weekline import configuration
from weekline.logger import LOGGER_NAME
from weekline.model.event import Event
from weekline.model.task import Task
from weekline.repository.configuration import CONFIGURATION_REPO
from weekline.repository.event import EVENT_REPO
from weekline.repository.task import TASK_REPO
from weekline.view import state as view_state


@pytest.fixture(autouse=True)
def isolated_storage(tmp_path, monkeypatch) -> Iterator[None]:
    """Point config and data files at tmp_path and reset the repositories."""
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    config_path.mkdir()
    data_path.mkdir()

    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    original_data_path = configuration.DATA_PATH
    configuration.set_data_path(data_path)

    for repository in (CONFIGURATION_REPO, TASK_REPO, EVENT_REPO):
        repository.invalidate()

    yield

    for repository in (CONFIGURATION_REPO, TASK_REPO, EVENT_REPO):
        repository.invalidate()
    configuration.set_data_path(original_data_path)
    view_state.set_show_header(True)
    view_state.set_no_wrap(False)

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def _make_task(id: int, category: str, task: str, sort_order: int = 0) -> Task:
    now = pendulum.datetime(2024, 1, 1, tz="UTC")
    return {
        "id": id,
        "category": category,
        "task": task,
        "sort_order": sort_order,
        "created": now,
        "updated": now,
    }


def _make_event(
    id: int,
    task_id: int,
    week_date: str,
    label: Optional[str] = None,
    color: Optional[str] = None,
) -> Event:
    return {
        "id": id,
        "task_id": task_id,
        "week_date": week_date,
        "label": label,
        "color": color,
        "created": pendulum.datetime(2024, 1, 1, tz="UTC"),
    }


@pytest.fixture
def make_task():
    return _make_task


@pytest.fixture
def make_event():
    return _make_event
