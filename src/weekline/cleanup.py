# SPDX-License-Identifier: MIT

import atexit

from weekline.repository.configuration import CONFIGURATION_REPO
from weekline.repository.event import EVENT_REPO
from weekline.repository.task import TASK_REPO


def flush_and_sync() -> None:
    CONFIGURATION_REPO.flush()

    # Flush entity repositories
    TASK_REPO.flush()
    EVENT_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
