"""
Workshop maintenance history models.

This package provides data models and pure functions for maintenance history:
- Status: Timeliness categories (OVERDUE, ON_TIME)
- Workshop: Interval policy per workshop (and per task)
- HistoryEntry: Logged maintenance events
- DerivedHistoryEntry: History joined with calculated timeliness
- compute_timeliness / filter_history / sort_history: The view pipeline
- apply_edit / can_edit: Lifetime edit quota for history records
- MaintenanceRecords: Main aggregate loaded from a data file
"""

from .status import Status
from .workshop import Workshop
from .history_entry import HistoryEntry
from .derived import DerivedHistoryEntry
from .calculations import calc_due_date, calc_overdue_days, check_status, to_date
from .timeliness import compute_timeliness, derive_entry
from .filtering import ALL_WORKSHOPS, FilterCriteria, filter_history
from .sorting import SortCriteria, SortDirection, SortKey, sort_history
from .edit_quota import EDIT_QUOTA, QuotaExceeded, apply_edit, can_edit, remaining_edits
from .view import ViewState, build_view
from .export import EXPORT_HEADERS, export_row, export_rows
from .records import MaintenanceRecords
from .loader import load_records, read_records_json, update_history_entry

__all__ = [
    "Status",
    "Workshop",
    "HistoryEntry",
    "DerivedHistoryEntry",
    "calc_due_date",
    "calc_overdue_days",
    "check_status",
    "to_date",
    "compute_timeliness",
    "derive_entry",
    "ALL_WORKSHOPS",
    "FilterCriteria",
    "filter_history",
    "SortCriteria",
    "SortDirection",
    "SortKey",
    "sort_history",
    "EDIT_QUOTA",
    "QuotaExceeded",
    "apply_edit",
    "can_edit",
    "remaining_edits",
    "ViewState",
    "build_view",
    "EXPORT_HEADERS",
    "export_row",
    "export_rows",
    "MaintenanceRecords",
    "load_records",
    "read_records_json",
    "update_history_entry",
]
