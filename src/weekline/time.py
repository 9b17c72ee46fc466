# SPDX-License-Identifier: MIT

from typing import TypeAlias, Literal, Optional, cast

import pendulum

WeekStatus: TypeAlias = Literal["past", "current", "future"]


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_from_local_date_str(date_str: str) -> pendulum.DateTime:
    """Parse a local date string in 'YYYY-MM-DD' format to a pendulum.DateTime at midnight local time."""
    return cast(pendulum.DateTime, pendulum.parse(date_str, tz="local"))


def datetime_to_local_date_str(datetime: pendulum.DateTime) -> str:
    """Convert a pendulum.DateTime to a local date string in 'YYYY-MM-DD' format."""
    return datetime.in_tz("local").format("YYYY-MM-DD")


def is_week_date(date_str: str) -> bool:
    try:
        parsed = pendulum.parse(date_str, exact=True)
    except ValueError:
        # pendulum's ParserError is a ValueError
        return False
    return isinstance(parsed, pendulum.Date) and not isinstance(
        parsed, pendulum.DateTime
    )


def date_from_local_date_str(date_str: str) -> pendulum.Date:
    return datetime_from_local_date_str(date_str).date()


def days_between(start: pendulum.Date, end: pendulum.Date) -> int:
    """Signed number of calendar days from start to end."""
    return end.toordinal() - start.toordinal()


def format_header(date_str: str) -> str:
    """Render a week date as abbreviated month and day, e.g. 'Jan 5'."""
    return datetime_from_local_date_str(date_str).format("MMM D")


def start_of_current_week(now: Optional[pendulum.DateTime] = None) -> pendulum.DateTime:
    """
    Return local midnight of the most recent Sunday relative to now.

    Weeks start on Sunday (day-of-week 0) and are bucketed by the viewer's
    local wall clock, so viewers in different zones can disagree.
    """
    if now is None:
        now = now_local()
    local_now = now.in_tz("local")
    # isoweekday: Monday=1 .. Sunday=7, so Sunday maps to 0
    days_since_sunday = local_now.isoweekday() % 7
    return local_now.start_of("day").subtract(days=days_since_sunday)


def is_current_week(date_str: str, now: Optional[pendulum.DateTime] = None) -> bool:
    week_start = start_of_current_week(now)
    week_end = week_start.add(days=7)
    date = datetime_from_local_date_str(date_str)
    return week_start <= date < week_end


def is_past_week(date_str: str, now: Optional[pendulum.DateTime] = None) -> bool:
    date = datetime_from_local_date_str(date_str)
    return date < start_of_current_week(now)


def week_status(date_str: str, now: Optional[pendulum.DateTime] = None) -> WeekStatus:
    if now is None:
        now = now_local()
    if is_past_week(date_str, now):
        return "past"
    if is_current_week(date_str, now):
        return "current"
    return "future"


def generate_week_dates(start: str, weeks: int) -> list[str]:
    """
    Generate a contiguous, ascending axis of weekly dates.

    Args:
        start: First week date in 'YYYY-MM-DD' format
        weeks: Number of week columns to produce

    Returns:
        List of 'YYYY-MM-DD' strings, one week apart
    """
    dates = []
    current = datetime_from_local_date_str(start)
    for _ in range(weeks):
        dates.append(current.format("YYYY-MM-DD"))
        current = current.add(weeks=1)
    return dates
