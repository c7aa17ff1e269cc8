"""Helper functions for timeliness calculations."""

from datetime import date, datetime, timedelta
from typing import Union

from dateutil.parser import isoparse

from .status import Status

DateLike = Union[str, date, datetime]


def to_date(value: DateLike) -> date:
    """
    Normalize a date-ish value to a calendar date.

    Accepts date objects, datetimes and ISO strings with or without a
    time component. Time of day is dropped.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return isoparse(value.strip()).date()


def calc_due_date(last_date: date, interval_days: int) -> date:
    """Calculate next due date: last maintenance + interval days."""
    return last_date + timedelta(days=interval_days)


def calc_overdue_days(as_of: date, due: date) -> int:
    """Whole days past due, 0 when not yet past due."""
    return max(0, (as_of - due).days)


def check_status(as_of: date, due: date) -> Status:
    """OVERDUE once the evaluation date is strictly after the due date."""
    if as_of > due:
        return Status.OVERDUE
    return Status.ON_TIME
