#!/usr/bin/env python3
"""Tests for DerivedHistoryEntry dataclass."""
from datetime import date

import pytest
from maintenance import DerivedHistoryEntry, HistoryEntry, Status


@pytest.fixture
def entry():
    return HistoryEntry(
        "H1", "W1", "E1", "Press 1", "lube", "Lubrication", "2024-01-15",
        notes="Greased", edit_count=1,
    )


class TestDerivedHistoryEntry:
    """Tests for DerivedHistoryEntry dataclass."""

    def test_is_overdue_overdue(self, entry):
        derived = DerivedHistoryEntry(entry, "Press shop", Status.OVERDUE, date(2024, 1, 20), 3)
        assert derived.is_overdue is True

    def test_is_overdue_on_time(self, entry):
        derived = DerivedHistoryEntry(entry, "Press shop", Status.ON_TIME, date(2024, 2, 20))
        assert derived.is_overdue is False
        assert derived.overdue_days == 0

    def test_passes_through_entry_fields(self, entry):
        derived = DerivedHistoryEntry(entry, "Press shop", Status.ON_TIME, date(2024, 2, 20))
        assert derived.id == "H1"
        assert derived.workshop_id == "W1"
        assert derived.workshop_name == "Press shop"
        assert derived.equipment_id == "E1"
        assert derived.equipment_name == "Press 1"
        assert derived.task_id == "lube"
        assert derived.task_name == "Lubrication"
        assert derived.maintenance_date == "2024-01-15"
        assert derived.notes == "Greased"
        assert derived.edit_count == 1
