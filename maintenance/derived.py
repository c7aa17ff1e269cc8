"""DerivedHistoryEntry dataclass for calculated timeliness."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from .history_entry import HistoryEntry
from .status import Status


@dataclass(frozen=True)
class DerivedHistoryEntry:
    """A history entry joined with its workshop and timeliness status."""

    entry: HistoryEntry
    workshop_name: str
    status: Status
    due_date: date
    overdue_days: int = 0

    @property
    def is_overdue(self) -> bool:
        return self.status == Status.OVERDUE

    @property
    def id(self) -> str:
        return self.entry.id

    @property
    def workshop_id(self) -> str:
        return self.entry.workshop_id

    @property
    def equipment_id(self) -> str:
        return self.entry.equipment_id

    @property
    def equipment_name(self) -> str:
        return self.entry.equipment_name

    @property
    def task_id(self) -> str:
        return self.entry.task_id

    @property
    def task_name(self) -> str:
        return self.entry.task_name

    @property
    def maintenance_date(self) -> str:
        return self.entry.maintenance_date

    @property
    def notes(self) -> Optional[str]:
        return self.entry.notes

    @property
    def edit_count(self) -> int:
        return self.entry.edit_count
