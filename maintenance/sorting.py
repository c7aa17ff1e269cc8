"""Column sorting of derived history with overdue-first status ordering."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List

from .calculations import to_date
from .derived import DerivedHistoryEntry


class SortKey(Enum):
    """Sortable history columns."""

    WORKSHOP_NAME = "workshopName"
    EQUIPMENT_NAME = "equipmentName"
    TASK_NAME = "taskName"
    MAINTENANCE_DATE = "maintenanceDate"
    STATUS = "status"


class SortDirection(Enum):
    ASC = "asc"
    DESC = "desc"

    @property
    def toggled(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


def _status_key(entry: DerivedHistoryEntry) -> tuple:
    # Overdue first, most overdue first; on-time entries all tie.
    if entry.is_overdue:
        return (0, -entry.overdue_days)
    return (1, 0)


SORT_ACCESSORS: Dict[SortKey, Callable[[DerivedHistoryEntry], Any]] = {
    SortKey.WORKSHOP_NAME: lambda e: e.workshop_name,
    SortKey.EQUIPMENT_NAME: lambda e: e.equipment_name,
    SortKey.TASK_NAME: lambda e: e.task_name,
    SortKey.MAINTENANCE_DATE: lambda e: to_date(e.maintenance_date),
    SortKey.STATUS: _status_key,
}


@dataclass(frozen=True)
class SortCriteria:
    """Active sort column and direction."""

    key: SortKey = SortKey.MAINTENANCE_DATE
    direction: SortDirection = SortDirection.DESC

    def select(self, key: SortKey) -> "SortCriteria":
        """
        Header-click transition.

        Selecting the active key toggles direction; a new key starts ascending.
        """
        if key == self.key:
            return SortCriteria(key, self.direction.toggled)
        return SortCriteria(key, SortDirection.ASC)


def sort_history(
    entries: Iterable[DerivedHistoryEntry],
    key: SortKey,
    direction: SortDirection = SortDirection.ASC,
) -> List[DerivedHistoryEntry]:
    """
    Stable ascending sort on ``key``; descending reverses the sorted list.

    Reversing the list (rather than sorting with reverse=True) also flips
    the relative order of entries that compare equal.
    """
    result = sorted(entries, key=SORT_ACCESSORS[key])
    if direction == SortDirection.DESC:
        result.reverse()
    return result
