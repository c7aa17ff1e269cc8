"""MaintenanceRecords - snapshot of workshops and history for one data file."""

from datetime import date
from typing import List, Optional

from .calculations import to_date
from .derived import DerivedHistoryEntry
from .history_entry import HistoryEntry
from .view import ViewState, build_view
from .workshop import Workshop


class MaintenanceRecords:
    """Workshops, their maintenance history and the evaluation date."""

    def __init__(
        self,
        workshops: List[Workshop],
        history: Optional[List[HistoryEntry]] = None,
        state_as_of_date: Optional[str] = None,
    ):
        self.workshops = workshops
        self.history = history or []
        self._state_as_of_date = state_as_of_date

    @property
    def as_of_date(self) -> str:
        """Evaluation date, defaults to today."""
        if self._state_as_of_date:
            return self._state_as_of_date
        return date.today().isoformat()

    def get_workshop(self, workshop_id: str) -> Optional[Workshop]:
        """Find a workshop by id."""
        for workshop in self.workshops:
            if workshop.id == workshop_id:
                return workshop
        return None

    def get_entry(self, entry_id: str) -> Optional[HistoryEntry]:
        """Find a history entry by id."""
        for entry in self.history:
            if entry.id == entry_id:
                return entry
        return None

    def view(
        self, state: Optional[ViewState] = None, as_of: Optional[date] = None
    ) -> List[DerivedHistoryEntry]:
        """History in display order for ``state`` (default view when omitted)."""
        if as_of is None:
            as_of = to_date(self.as_of_date)
        return build_view(self.history, self.workshops, state or ViewState(), as_of)
