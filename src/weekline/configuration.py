# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "weekline"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_TASKS_PATH: Path = DATA_PATH / "tasks.yaml"
DATA_EVENTS_PATH: Path = DATA_PATH / "events.yaml"

DEFAULT_TIMELINE_START = "2024-11-14"
DEFAULT_TIMELINE_WEEKS = 26


class Configuration(TypedDict):
    show_header: bool
    log_level: str
    data_path: Optional[str]
    timeline_start: str
    timeline_weeks: int
    week_dates: Optional[list[str]]
    default_categories: Optional[list[str]]
    auto_color_events: bool
    column_width: int
    scroll_lead_columns: int


def get_default_configuration() -> Configuration:
    return {
        "show_header": True,
        "log_level": "WARNING",
        "data_path": None,
        "timeline_start": DEFAULT_TIMELINE_START,
        "timeline_weeks": DEFAULT_TIMELINE_WEEKS,
        "week_dates": None,
        "default_categories": None,
        "auto_color_events": True,
        "column_width": 8,
        "scroll_lead_columns": 2,
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_TASKS_PATH, DATA_EVENTS_PATH

    DATA_PATH = data_path
    DATA_TASKS_PATH = DATA_PATH / "tasks.yaml"
    DATA_EVENTS_PATH = DATA_PATH / "events.yaml"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are read.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
