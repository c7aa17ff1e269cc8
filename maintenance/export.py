"""Row data handed to spreadsheet exporters."""

from typing import Any, Dict, Iterable, List

from .calculations import to_date
from .derived import DerivedHistoryEntry

EXPORT_HEADERS = [
    "id",
    "workshopId",
    "workshopName",
    "equipmentId",
    "equipmentName",
    "taskId",
    "taskName",
    "maintenanceDate",
    "status",
    "overdueDays",
    "notes",
    "editCount",
]


def export_row(entry: DerivedHistoryEntry) -> Dict[str, Any]:
    """Flatten a derived entry to the exported columns (camelCase keys)."""
    return {
        "id": entry.id,
        "workshopId": entry.workshop_id,
        "workshopName": entry.workshop_name,
        "equipmentId": entry.equipment_id,
        "equipmentName": entry.equipment_name,
        "taskId": entry.task_id,
        "taskName": entry.task_name,
        "maintenanceDate": to_date(entry.maintenance_date).isoformat(),
        "status": entry.status.name,
        "overdueDays": entry.overdue_days,
        "notes": entry.notes,
        "editCount": entry.edit_count,
    }


def export_rows(entries: Iterable[DerivedHistoryEntry]) -> List[Dict[str, Any]]:
    """Export rows in the order given; callers pass the final display order."""
    return [export_row(entry) for entry in entries]
