"""Lifetime edit quota for history records."""

from dataclasses import dataclass, replace
from typing import Union

from .calculations import DateLike, to_date
from .history_entry import HistoryEntry

EDIT_QUOTA = 2


@dataclass(frozen=True)
class QuotaExceeded:
    """Rejected edit: the record has used all of its corrections."""

    entry_id: str
    edit_count: int
    quota: int = EDIT_QUOTA


def can_edit(entry: HistoryEntry) -> bool:
    return entry.edit_count < EDIT_QUOTA


def remaining_edits(entry: HistoryEntry) -> int:
    """Edits still available, never negative."""
    return max(0, EDIT_QUOTA - entry.edit_count)


def apply_edit(entry: HistoryEntry, new_date: DateLike) -> Union[HistoryEntry, QuotaExceeded]:
    """
    Propose a corrected maintenance date.

    Returns a new entry with the date replaced and the counter bumped, or
    QuotaExceeded when no edits remain. The input entry is never changed;
    the caller commits the returned entry.
    """
    if not can_edit(entry):
        return QuotaExceeded(entry.id, entry.edit_count)
    return replace(
        entry,
        maintenance_date=to_date(new_date).isoformat(),
        edit_count=entry.edit_count + 1,
    )
