#!/usr/bin/env python3
"""Tests for YAML loading and saving utilities."""

import pytest
import yaml

from maintenance import (
    HistoryEntry,
    MaintenanceRecords,
    Workshop,
    apply_edit,
    load_records,
    update_history_entry,
)

RECORDS_YAML = """
state:
  asOfDate: '2024-02-05'

workshops:
  - id: W1
    name: Press shop
    intervalDays: 30
    taskIntervals:
      lube: 14
  - id: W2
    name: Paint shop
    intervalDays: 60

history:
  - id: H1
    workshopId: W1
    equipmentId: E1
    equipmentName: Press 1
    taskId: inspect
    taskName: Hydraulic inspection
    maintenanceDate: '2024-01-01'
  - id: H2
    workshopId: W2
    equipmentId: E3
    equipmentName: Spray booth
    taskId: filters
    taskName: Filter change
    maintenanceDate: '2023-11-20'
    notes: Used spare filters
    editCount: 1
"""


@pytest.fixture
def records_file(tmp_path):
    path = tmp_path / "plant.yaml"
    path.write_text(RECORDS_YAML)
    return path


# =============================================================================
# load_records tests
# =============================================================================


class TestLoadRecords:
    """Tests for load_records function."""

    def test_loads_records(self, records_file):
        records = load_records(records_file)

        assert isinstance(records, MaintenanceRecords)
        assert records.as_of_date == "2024-02-05"
        assert len(records.workshops) == 2
        assert all(isinstance(w, Workshop) for w in records.workshops)
        assert len(records.history) == 2
        assert all(isinstance(h, HistoryEntry) for h in records.history)

    def test_workshop_fields(self, records_file):
        workshop = load_records(records_file).workshops[0]
        assert workshop.id == "W1"
        assert workshop.name == "Press shop"
        assert workshop.interval_days == 30
        assert workshop.task_intervals == {"lube": 14}

    def test_history_fields(self, records_file):
        entry = load_records(records_file).history[1]
        assert entry == HistoryEntry(
            "H2", "W2", "E3", "Spray booth", "filters", "Filter change",
            "2023-11-20", "Used spare filters", 1,
        )

    def test_optional_fields_default(self, records_file):
        entry = load_records(records_file).history[0]
        assert entry.notes is None
        assert entry.edit_count == 0

    def test_unquoted_dates_and_numeric_ids(self, tmp_path):
        path = tmp_path / "plain.yaml"
        path.write_text("""
state:
  asOfDate: 2024-02-05
workshops:
  - id: 1
    name: Press shop
    intervalDays: 30
history:
  - id: 10
    workshopId: 1
    equipmentId: 7
    equipmentName: Press 1
    taskId: 3
    taskName: Inspection
    maintenanceDate: 2024-01-01
""")
        records = load_records(path)
        assert records.as_of_date == "2024-02-05"
        assert records.workshops[0].id == "1"
        entry = records.history[0]
        assert entry.id == "10"
        assert entry.workshop_id == "1"
        assert entry.maintenance_date == "2024-01-01"

    def test_missing_history(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("workshops:\n  - id: W1\n    name: Press shop\n    intervalDays: 30\n")
        records = load_records(path)
        assert records.history == []

    def test_malformed_yaml_raises(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("workshops: [unclosed")
        with pytest.raises(yaml.YAMLError):
            load_records(path)

    def test_empty_file_raises(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(ValueError, match="not a maintenance records file"):
            load_records(path)

    def test_missing_workshops_raises(self, tmp_path):
        path = tmp_path / "history_only.yaml"
        path.write_text("history: []\n")
        with pytest.raises(ValueError, match="not a maintenance records file"):
            load_records(path)


# =============================================================================
# update_history_entry tests
# =============================================================================


class TestUpdateHistoryEntry:
    """Tests for update_history_entry function."""

    def test_replaces_matching_entry(self, records_file):
        records = load_records(records_file)
        edited = apply_edit(records.get_entry("H1"), "2024-01-03")

        update_history_entry(records_file, edited)

        reloaded = load_records(records_file)
        assert reloaded.get_entry("H1").maintenance_date == "2024-01-03"
        assert reloaded.get_entry("H1").edit_count == 1
        assert reloaded.get_entry("H2") == records.get_entry("H2")

    def test_preserves_other_sections(self, records_file):
        records = load_records(records_file)
        update_history_entry(records_file, apply_edit(records.get_entry("H2"), "2023-11-21"))

        data = yaml.safe_load(records_file.read_text())
        assert data["state"] == {"asOfDate": "2024-02-05"}
        assert [w["id"] for w in data["workshops"]] == ["W1", "W2"]
        assert data["history"][1]["editCount"] == 2
        assert data["history"][1]["notes"] == "Used spare filters"

    def test_omits_empty_optional_fields(self, records_file):
        records = load_records(records_file)
        update_history_entry(records_file, records.get_entry("H1"))

        data = yaml.safe_load(records_file.read_text())
        assert "notes" not in data["history"][0]
        assert "editCount" not in data["history"][0]

    def test_unknown_id_raises(self, records_file):
        entry = HistoryEntry("H9", "W1", "E1", "Press 1", "inspect", "Inspection", "2024-01-01")
        with pytest.raises(KeyError):
            update_history_entry(records_file, entry)
