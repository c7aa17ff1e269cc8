"""YAML loading and saving utilities for maintenance records."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .history_entry import HistoryEntry
from .records import MaintenanceRecords
from .workshop import Workshop

LOGGER = logging.getLogger(__name__)


def _parse_object(
    dct: Dict[str, Any]
) -> Union[Workshop, HistoryEntry, MaintenanceRecords, dict]:
    """Parse dictionary into appropriate object type."""
    # Workshop object
    if "intervalDays" in dct and "name" in dct:
        return Workshop(
            str(dct["id"]),
            dct["name"],
            dct["intervalDays"],
            dct.get("taskIntervals"),
        )
    # History entry
    elif "workshopId" in dct:
        return HistoryEntry(
            str(dct["id"]),
            str(dct["workshopId"]),
            str(dct["equipmentId"]),
            dct["equipmentName"],
            str(dct["taskId"]),
            dct["taskName"],
            str(dct["maintenanceDate"]),
            dct.get("notes"),
            dct.get("editCount") or 0,
        )
    # Top-level records object
    elif "workshops" in dct:
        state = dct.get("state") or {}
        as_of = state.get("asOfDate")
        return MaintenanceRecords(
            dct["workshops"] or [],
            dct.get("history"),
            str(as_of) if as_of else None,
        )
    else:
        # Return dict as-is for unknown structures (like 'state', 'taskIntervals')
        return dct


def _read_raw(filename: Union[str, Path]) -> Dict[str, Any]:
    with open(filename, "r") as fp:
        return yaml.load(fp, Loader=yaml.SafeLoader)


def _write_raw(filename: Union[str, Path], data: Dict[str, Any]) -> None:
    with open(filename, "w") as fp:
        yaml.dump(
            data,
            fp,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            width=120,
        )


def read_records_json(filename: Union[str, Path]) -> str:
    """
    Read a records YAML file as JSON text.

    Unquoted YAML dates load as date objects; default=str keeps them ISO,
    so loading and schema validation see the same values.
    """
    with open(filename, "rb") as fp:
        return json.dumps(yaml.load(fp, Loader=yaml.SafeLoader), indent=4, default=str)


def load_records(filename: Union[str, Path]) -> MaintenanceRecords:
    """Load workshops and history from a YAML file."""
    records = json.loads(read_records_json(filename), object_hook=_parse_object)
    if not isinstance(records, MaintenanceRecords):
        raise ValueError(f"{filename}: not a maintenance records file")
    LOGGER.debug(
        "Loaded %d workshops and %d history entries from %s",
        len(records.workshops),
        len(records.history),
        filename,
    )
    return records


def _entry_to_dict(entry: HistoryEntry) -> Dict[str, Any]:
    """Serialize a HistoryEntry to the YAML dict format (camelCase keys)."""
    d: Dict[str, Any] = {
        "id": entry.id,
        "workshopId": entry.workshop_id,
        "equipmentId": entry.equipment_id,
        "equipmentName": entry.equipment_name,
        "taskId": entry.task_id,
        "taskName": entry.task_name,
        "maintenanceDate": entry.maintenance_date,
    }
    if entry.notes is not None:
        d["notes"] = entry.notes
    if entry.edit_count:
        d["editCount"] = entry.edit_count
    return d


def update_history_entry(filename: Union[str, Path], entry: HistoryEntry) -> None:
    """
    Replace the stored history entry that has the same id as ``entry``.

    Loads the raw YAML, swaps the matching item in the history list,
    and writes back to the file.
    """
    data = _read_raw(filename)

    history = data.get("history") or []
    for index, item in enumerate(history):
        if str(item.get("id")) == entry.id:
            history[index] = _entry_to_dict(entry)
            break
    else:
        raise KeyError(f"History entry {entry.id!r} not found in {filename}")

    _write_raw(filename, data)
    LOGGER.info("Updated history entry %s in %s", entry.id, filename)
