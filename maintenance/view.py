"""View state and the derive -> filter -> sort pipeline."""

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Iterable, List

from .derived import DerivedHistoryEntry
from .filtering import FilterCriteria, filter_history
from .history_entry import HistoryEntry
from .sorting import SortCriteria, SortKey, sort_history
from .timeliness import compute_timeliness
from .workshop import Workshop


@dataclass(frozen=True)
class ViewState:
    """Filter and sort selection for a history table."""

    filter: FilterCriteria = field(default_factory=FilterCriteria)
    sort: SortCriteria = field(default_factory=SortCriteria)

    def sorted_by(self, key: SortKey) -> "ViewState":
        return replace(self, sort=self.sort.select(key))

    def cleared_filters(self) -> "ViewState":
        return replace(self, filter=FilterCriteria())

    def apply(self, entries: Iterable[DerivedHistoryEntry]) -> List[DerivedHistoryEntry]:
        """Filter then sort already-derived entries."""
        filtered = filter_history(entries, self.filter)
        return sort_history(filtered, self.sort.key, self.sort.direction)


def build_view(
    history: Iterable[HistoryEntry],
    workshops: Iterable[Workshop],
    state: ViewState,
    as_of: date,
) -> List[DerivedHistoryEntry]:
    """Derive timeliness for ``history`` and return it in display order."""
    return state.apply(compute_timeliness(history, workshops, as_of))
