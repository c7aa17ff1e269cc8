"""Status enum for maintenance timeliness."""

from enum import Enum


class Status(Enum):
    """Timeliness categories. Lower value = more urgent."""

    OVERDUE = 1
    ON_TIME = 2
