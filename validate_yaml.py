#!/usr/bin/env python3
"""Validate maintenance record YAML files against the schema."""
import json
import sys
from pathlib import Path
from typing import Iterable, List

import yaml
from jsonschema import Draft7Validator, FormatChecker

from maintenance import read_records_json, to_date

SCHEMA_PATH = Path(__file__).parent / "schema.yaml"
DATA_DIR = Path(__file__).parent / "data"


def load_schema() -> dict:
    """Load the JSON schema from schema.yaml."""
    with open(SCHEMA_PATH) as f:
        return yaml.safe_load(f)


def make_format_checker() -> FormatChecker:
    """Standard formats plus 'maintenance-date' (a date, optionally with time)."""
    checker = FormatChecker()

    @checker.checks("maintenance-date", raises=ValueError)
    def is_maintenance_date(instance) -> bool:
        if not isinstance(instance, str):
            return True
        to_date(instance)
        return True

    return checker


def validate_records_file(filepath: Path, schema: dict) -> List[str]:
    """
    Validate a single records YAML file. Returns list of errors.

    The file is read exactly as the loader reads it, so unquoted YAML dates
    are checked as ISO strings.
    """
    try:
        data = json.loads(read_records_json(filepath))
    except yaml.YAMLError as e:
        return [f"YAML parse error: {e}"]
    except OSError as e:
        return [f"Error: {e}"]

    validator = Draft7Validator(schema, format_checker=make_format_checker())
    errors = []
    for error in sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path]):
        errors.append(f"Schema validation error: {error.message}")
        if error.path:
            errors.append(f"  at path: {'.'.join(str(p) for p in error.path)}")
    return errors


def find_records_files(paths: Iterable[str]) -> List[Path]:
    """Files named on the command line, or every YAML file in data/."""
    files = [Path(p) for p in paths]
    if files:
        return files
    return sorted(DATA_DIR.glob("*.yaml")) + sorted(DATA_DIR.glob("*.yml"))


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    if not args and not DATA_DIR.exists():
        print(f"Error: data directory not found: {DATA_DIR}")
        return 1

    files = find_records_files(args)
    if not files:
        print("Warning: No YAML files found")
        return 0

    schema = load_schema()
    failed = 0
    for filepath in files:
        errors = validate_records_file(filepath, schema)
        print(f"{'FAIL' if errors else 'OK'}: {filepath.name}")
        for error in errors:
            print(f"  {error}")
        failed += bool(errors)

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
