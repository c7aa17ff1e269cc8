#!/usr/bin/env python3
"""
Unified CLI for workshop maintenance history.

Commands:
  history    - View maintenance history with timeliness, filters and sorting
  edit       - Correct the maintenance date of a history entry
  workshops  - List workshops and their maintenance intervals
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from tabulate import tabulate

from maintenance import (
    ALL_WORKSHOPS,
    DerivedHistoryEntry,
    FilterCriteria,
    HistoryEntry,
    QuotaExceeded,
    SortCriteria,
    SortDirection,
    SortKey,
    ViewState,
    apply_edit,
    can_edit,
    export_rows,
    load_records,
    remaining_edits,
    to_date,
    update_history_entry,
)

LOGGER = logging.getLogger(__name__)

DATA_FILE_ENV = "MAINT_DATA_FILE"

# =============================================================================
# Formatting helpers
# =============================================================================


def format_status(entry: DerivedHistoryEntry) -> str:
    """Format timeliness for display (e.g., 'Overdue 5d' or 'On time')."""
    if entry.is_overdue:
        return f"Overdue {entry.overdue_days}d"
    return "On time"


def format_edit_hint(entry: HistoryEntry) -> str:
    """Describe how many corrections are left for an entry."""
    if not can_edit(entry):
        return "No edits remaining"
    return f"Edit ({remaining_edits(entry)} left)"


def truncate(text: Optional[str], max_len: int = 30) -> str:
    """Truncate text with ellipsis if too long."""
    if text is None:
        return "-"
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


# =============================================================================
# History command
# =============================================================================


def make_history_table(entries: List[DerivedHistoryEntry]) -> List[List[str]]:
    """Convert derived history entries to table rows."""
    rows = []
    for entry in entries:
        rows.append(
            [
                entry.id,
                entry.workshop_name,
                entry.equipment_name,
                entry.task_name,
                to_date(entry.maintenance_date).isoformat(),
                format_status(entry),
                truncate(entry.notes),
                format_edit_hint(entry.entry),
            ]
        )
    return rows


def view_state_from_args(args) -> ViewState:
    """Build the table view state from history command flags."""
    return ViewState(
        filter=FilterCriteria(
            workshop=args.workshop or ALL_WORKSHOPS,
            start_date=args.start,
            end_date=args.end,
        ),
        sort=SortCriteria(
            SortKey(args.sort),
            SortDirection.ASC if args.asc else SortDirection.DESC,
        ),
    )


def cmd_history(args):
    """View maintenance history with timeliness."""
    records = load_records(args.data_file)
    as_of = to_date(args.as_of or records.as_of_date)
    state = view_state_from_args(args)

    entries = records.view(state, as_of=as_of)

    if args.export:
        print(yaml.dump(export_rows(entries), allow_unicode=True, sort_keys=False))
        return 0

    overdue = sum(1 for e in entries if e.is_overdue)

    # Header
    print(f"Evaluated as of: {as_of.isoformat()}")
    print(f"Workshops: {len(records.workshops)}")
    print(f"Total entries: {len(records.history)}")
    if not state.filter.is_default:
        print(f"Showing: {len(entries)} (filtered)")
    if overdue:
        print(f"Overdue: {overdue}")
    print()

    if not entries:
        print("No history entries match the filters.")
        return 0

    headers = [
        "ID",
        "Workshop",
        "Equipment",
        "Task",
        "Date",
        "Status",
        "Notes",
        "Edits",
    ]
    print(tabulate(make_history_table(entries), headers=headers, tablefmt="simple"))

    return 0


# =============================================================================
# Edit command
# =============================================================================


def cmd_edit(args):
    """Correct the maintenance date of a history entry."""
    records = load_records(args.data_file)

    entry = records.get_entry(args.entry_id)
    if entry is None:
        print(f"Error: Unknown history entry '{args.entry_id}'")
        return 1

    if not can_edit(entry):
        print(f"Error: No edits remaining for entry '{entry.id}'")
        return 1

    result = apply_edit(entry, args.new_date)
    if isinstance(result, QuotaExceeded):
        print(f"Error: No edits remaining for entry '{result.entry_id}'")
        return 1

    # Show what will change
    print(f"Editing history entry {entry.id} in {args.data_file}:")
    print(f"  Equipment: {entry.equipment_name}")
    print(f"  Task:      {entry.task_name}")
    print(f"  Date:      {entry.maintenance_date} -> {result.maintenance_date}")
    print(f"  Edits left after save: {remaining_edits(result)}")
    print()

    if args.dry_run:
        print("(dry run - no changes made)")
        return 0

    update_history_entry(args.data_file, result)
    print("Entry saved.")

    return 0


# =============================================================================
# Workshops command
# =============================================================================


def cmd_workshops(args):
    """List workshops and their maintenance intervals."""
    records = load_records(args.data_file)

    print(f"Workshops: {len(records.workshops)}")
    print()

    rows = []
    for workshop in sorted(records.workshops, key=lambda w: w.name):
        overrides = ", ".join(
            f"{task}: {days}d" for task, days in sorted(workshop.task_intervals.items())
        )
        rows.append(
            [workshop.id, workshop.name, f"{workshop.interval_days}d", overrides or "-"]
        )

    headers = ["ID", "Workshop", "Interval", "Task Intervals"]
    print(tabulate(rows, headers=headers, tablefmt="simple"))

    return 0


# =============================================================================
# Main
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Workshop maintenance history",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s data/plant.yaml history
  %(prog)s data/plant.yaml history --workshop W1 --start 2024-01-01
  %(prog)s data/plant.yaml history --sort status --asc
  %(prog)s data/plant.yaml history --export
  %(prog)s data/plant.yaml edit H1 2024-01-03 --dry-run
  %(prog)s data/plant.yaml workshops
""",
    )
    parser.add_argument(
        "data_file",
        type=Path,
        nargs="?",
        default=os.environ.get(DATA_FILE_ENV),
        help=f"Path to records YAML file (default: ${DATA_FILE_ENV})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # History subcommand
    history_parser = subparsers.add_parser(
        "history", help="View maintenance history with timeliness"
    )
    history_parser.add_argument(
        "--workshop",
        type=str,
        help="Only show entries for this workshop id",
    )
    history_parser.add_argument(
        "--start",
        type=str,
        help="Only show entries on or after date (YYYY-MM-DD)",
    )
    history_parser.add_argument(
        "--end",
        type=str,
        help="Only show entries on or before date (YYYY-MM-DD)",
    )
    history_parser.add_argument(
        "--sort",
        choices=[k.value for k in SortKey],
        default=SortKey.MAINTENANCE_DATE.value,
        help="Sort column (default: maintenanceDate)",
    )
    direction = history_parser.add_mutually_exclusive_group()
    direction.add_argument(
        "--asc",
        action="store_true",
        help="Sort ascending instead of descending",
    )
    direction.add_argument(
        "--desc",
        action="store_true",
        help="Sort descending (default)",
    )
    history_parser.add_argument(
        "--as-of",
        type=str,
        help="Evaluate timeliness as of date (default: state.asOfDate or today)",
    )
    history_parser.add_argument(
        "--export",
        action="store_true",
        help="Print export rows as YAML instead of a table",
    )

    # Edit subcommand
    edit_parser = subparsers.add_parser(
        "edit", help="Correct the maintenance date of a history entry"
    )
    edit_parser.add_argument("entry_id", type=str, help="History entry id")
    edit_parser.add_argument(
        "new_date", type=str, help="Corrected date in YYYY-MM-DD format"
    )
    edit_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would change without saving",
    )

    # Workshops subcommand
    subparsers.add_parser("workshops", help="List workshops and intervals")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
    )

    if args.data_file is None:
        print(f"Error: No data file given and ${DATA_FILE_ENV} is not set")
        return 1
    data_file = Path(args.data_file)
    if not data_file.exists():
        print(f"Error: File not found: {data_file}")
        return 1
    args.data_file = data_file

    handlers = {
        "history": cmd_history,
        "edit": cmd_edit,
        "workshops": cmd_workshops,
    }
    try:
        return handlers[args.command](args)
    except (yaml.YAMLError, KeyError, ValueError) as e:
        LOGGER.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main() or 0)
