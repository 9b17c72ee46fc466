# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from weekline import configuration
from weekline.time import generate_week_dates


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        if not configuration.APP_CONFIG_PATH.is_file():
            self._config = configuration.get_default_configuration()
            return

        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            self._config = configuration.get_default_configuration()
            return

        # Migration: fill in any settings added since the file was written
        for key, value in configuration.get_default_configuration().items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def invalidate(self) -> None:
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def get_week_dates(self) -> list[str]:
        """Return the week-date axis: explicit dates if set, otherwise generated."""
        if self.config["week_dates"]:
            # Hand-edited files may hold unquoted YAML dates
            return [str(week_date) for week_date in self.config["week_dates"]]
        return generate_week_dates(
            str(self.config["timeline_start"]), self.config["timeline_weeks"]
        )

    def update_config(
        self,
        show_header: Optional[bool] = None,
        log_level: Optional[str] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        timeline_start: Optional[str] = None,
        timeline_weeks: Optional[int] = None,
        week_dates: Optional[list[str]] = None,
        remove_week_dates: bool = False,
        default_categories: Optional[list[str]] = None,
        remove_default_categories: bool = False,
        auto_color_events: Optional[bool] = None,
        column_width: Optional[int] = None,
        scroll_lead_columns: Optional[int] = None,
    ) -> None:
        self.is_dirty = True

        if show_header is not None:
            self.config["show_header"] = show_header
        if log_level is not None:
            self.config["log_level"] = log_level.upper()
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if timeline_start is not None:
            self.config["timeline_start"] = timeline_start
        if timeline_weeks is not None:
            self.config["timeline_weeks"] = timeline_weeks
        if week_dates is not None:
            self.config["week_dates"] = sorted(week_dates)
        if remove_week_dates:
            self.config["week_dates"] = None
        if default_categories is not None:
            self.config["default_categories"] = default_categories
        if remove_default_categories:
            self.config["default_categories"] = None
        if auto_color_events is not None:
            self.config["auto_color_events"] = auto_color_events
        if column_width is not None:
            self.config["column_width"] = column_width
        if scroll_lead_columns is not None:
            self.config["scroll_lead_columns"] = scroll_lead_columns


CONFIGURATION_REPO = ConfigurationRepository()
