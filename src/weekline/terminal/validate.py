# SPDX-License-Identifier: MIT

from typing import Optional

import typer
from rich.color import Color, ColorParseError

from weekline.time import is_week_date


def validate_color(color: Optional[str]) -> Optional[str]:
    if color is None:
        return None
    try:
        Color.parse(color)
    except ColorParseError:
        raise typer.BadParameter(f"Unknown color '{color}'")
    return color


def validate_week_date(week_date: Optional[str]) -> Optional[str]:
    if week_date is None:
        return None
    if not is_week_date(week_date):
        raise typer.BadParameter("Incorrect week date format, expected YYYY-MM-DD")
    return week_date


def validate_week_dates(week_dates: Optional[list[str]]) -> Optional[list[str]]:
    if week_dates is None:
        return None
    for week_date in week_dates:
        validate_week_date(week_date)
    return week_dates


def validate_positive(value: Optional[int]) -> Optional[int]:
    if value is None:
        return None
    if value < 1:
        raise typer.BadParameter("Must be at least 1")
    return value


def validate_log_level(level: Optional[str]) -> Optional[str]:
    if level is None:
        return None
    if level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise typer.BadParameter(
            "Log level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL"
        )
    return level.upper()
