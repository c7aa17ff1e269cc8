"""HistoryEntry class for maintenance records."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class HistoryEntry:
    """A logged maintenance event. Edits produce a new instance."""

    id: str
    workshop_id: str
    equipment_id: str
    equipment_name: str
    task_id: str
    task_name: str
    maintenance_date: str
    notes: Optional[str] = None
    edit_count: int = 0
