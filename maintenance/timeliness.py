"""Timeliness calculation: join history with workshop interval policy."""

import logging
from datetime import date
from typing import Dict, Iterable, List

from .calculations import calc_due_date, calc_overdue_days, check_status, to_date
from .derived import DerivedHistoryEntry
from .history_entry import HistoryEntry
from .workshop import Workshop

LOGGER = logging.getLogger(__name__)


def derive_entry(entry: HistoryEntry, workshop: Workshop, as_of: date) -> DerivedHistoryEntry:
    """
    Calculate the status of a single history entry.

    Logic:
    - Interval comes from the workshop (per-task override first)
    - Due date = maintenance date + interval
    - Evaluation date after due date: OVERDUE by (as_of - due) days
    - Otherwise ON_TIME with 0 overdue days
    """
    due_date = calc_due_date(
        to_date(entry.maintenance_date), workshop.interval_for(entry.task_id)
    )
    return DerivedHistoryEntry(
        entry=entry,
        workshop_name=workshop.name,
        status=check_status(as_of, due_date),
        due_date=due_date,
        overdue_days=calc_overdue_days(as_of, due_date),
    )


def compute_timeliness(
    history: Iterable[HistoryEntry],
    workshops: Iterable[Workshop],
    as_of: date,
) -> List[DerivedHistoryEntry]:
    """
    Derive timeliness for every history entry, preserving input order.

    Entries whose workshop is not in ``workshops`` are left out of the
    result and logged; they are an upstream data problem, not a failure.
    """
    by_id: Dict[str, Workshop] = {w.id: w for w in workshops}
    derived = []
    for entry in history:
        workshop = by_id.get(entry.workshop_id)
        if workshop is None:
            LOGGER.warning(
                "History entry %s references unknown workshop %r; skipped",
                entry.id,
                entry.workshop_id,
            )
            continue
        derived.append(derive_entry(entry, workshop, as_of))
    return derived
