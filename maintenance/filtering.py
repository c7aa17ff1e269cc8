"""Workshop and date-range filtering of derived history."""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .calculations import DateLike, to_date
from .derived import DerivedHistoryEntry

ALL_WORKSHOPS = "all"


@dataclass(frozen=True)
class FilterCriteria:
    """Workshop selector plus inclusive, independently optional date bounds."""

    workshop: str = ALL_WORKSHOPS
    start_date: Optional[DateLike] = None
    end_date: Optional[DateLike] = None

    @property
    def is_default(self) -> bool:
        return (
            self.workshop == ALL_WORKSHOPS
            and not self.start_date
            and not self.end_date
        )


def filter_history(
    entries: Iterable[DerivedHistoryEntry], criteria: FilterCriteria
) -> List[DerivedHistoryEntry]:
    """
    Keep entries matching all criteria, in their original relative order.

    Both date bounds are inclusive and compared by calendar date. A start
    after the end simply matches nothing.
    """
    start = to_date(criteria.start_date) if criteria.start_date else None
    end = to_date(criteria.end_date) if criteria.end_date else None

    result = []
    for entry in entries:
        if criteria.workshop != ALL_WORKSHOPS and entry.workshop_id != criteria.workshop:
            continue
        if start is not None or end is not None:
            entry_date = to_date(entry.maintenance_date)
            if start is not None and entry_date < start:
                continue
            if end is not None and entry_date > end:
                continue
        result.append(entry)
    return result
