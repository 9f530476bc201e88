#!/usr/bin/env python3
"""Validate fleet YAML files against the schema and load them into a registry."""
import sys
from pathlib import Path
from typing import Optional

import yaml
from jsonschema import validate, ValidationError

from fleet.loader import load_schema, parse_fleet_data, populate_registry
from fleet.registry import FleetRegistry


def check_fleet_file(
    filepath: Path, schema: dict
) -> tuple[list[str], Optional[FleetRegistry]]:
    """
    Validate a fleet file and load it into a fresh registry.

    Returns the list of errors and the populated registry (None on failure).
    """
    errors = []
    try:
        with open(filepath) as f:
            data = yaml.safe_load(f)
        validate(instance=data, schema=schema)
        registry = populate_registry(parse_fleet_data(data), FleetRegistry())
    except yaml.YAMLError as e:
        errors.append(f"YAML parse error: {e}")
    except ValidationError as e:
        errors.append(f"Schema validation error: {e.message}")
        if e.path:
            errors.append(f"  at path: {'.'.join(str(p) for p in e.path)}")
    except (KeyError, TypeError, ValueError) as e:
        errors.append(f"Load error: {e}")
    except OSError as e:
        errors.append(f"Error: {e}")
    else:
        return errors, registry
    return errors, None


def validate_fleet_file(filepath: Path, schema: dict) -> list[str]:
    """Validate a single fleet YAML file. Returns list of errors."""
    errors, _ = check_fleet_file(filepath, schema)
    return errors


def main():
    """Validate all fleet YAML files in the fleets/ directory."""
    schema = load_schema()
    fleets_dir = Path(__file__).parent / "fleets"

    if not fleets_dir.exists():
        print(f"Error: fleets directory not found: {fleets_dir}")
        return 1

    yaml_files = list(fleets_dir.glob("*.yaml")) + list(fleets_dir.glob("*.yml"))

    if not yaml_files:
        print(f"Warning: No YAML files found in {fleets_dir}")
        return 0

    all_valid = True
    for filepath in sorted(yaml_files):
        errors, registry = check_fleet_file(filepath, schema)
        if errors:
            print(f"FAIL: {filepath.name}")
            for error in errors:
                print(f"  {error}")
            all_valid = False
        else:
            print(
                f"OK: {filepath.name} ({len(registry)} vehicles, "
                f"{len(registry.location_snapshot())} locations)"
            )

    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
