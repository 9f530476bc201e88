"""YAML loading and saving utilities for fleet description files."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from jsonschema import validate

from .location import GeoCoordinate
from .registry import FleetRegistry
from .routing import RoutingSettings
from .vehicle import Vehicle, make_vehicle

SCHEMA_PATH = Path(__file__).parent / "schema.yaml"

# camelCase file keys -> vehicle constructor arguments
_VEHICLE_FIELDS = {
    "make": "make",
    "model": "model",
    "mileage": "mileage",
    "fuelEfficiency": "fuel_efficiency",
    "available": "available",
    "passengerCapacity": "passenger_capacity",
    "loadCapacity": "load_capacity",
    "type": "type",
    "cylinderCount": "cylinder_count",
}


@dataclass
class FleetEntry:
    """A vehicle from a fleet file with its service threshold and position."""

    vehicle: Vehicle
    mileage_to_next_service: int
    location: Optional[GeoCoordinate] = None


@dataclass
class FleetConfig:
    """Parsed contents of a fleet file."""

    entries: List[FleetEntry] = field(default_factory=list)
    locations: Dict[str, GeoCoordinate] = field(default_factory=dict)
    routing: Optional[RoutingSettings] = None


def load_schema() -> dict:
    """Load the JSON schema for fleet files."""
    with open(SCHEMA_PATH) as f:
        return yaml.safe_load(f)


def _parse_coordinate(dct: Dict[str, Any]) -> GeoCoordinate:
    return GeoCoordinate(dct["latitude"], dct["longitude"])


def _parse_vehicle_object(dct: Dict[str, Any]) -> Union[FleetEntry, GeoCoordinate]:
    """Parse a dictionary from the vehicles list into the appropriate object."""
    # Vehicle location (innermost, converted first)
    if "latitude" in dct and "longitude" in dct:
        return _parse_coordinate(dct)
    # Vehicle entry
    fields = {name: dct[key] for key, name in _VEHICLE_FIELDS.items() if key in dct}
    return FleetEntry(
        make_vehicle(dct["kind"], **fields),
        dct["mileageToNextService"],
        dct.get("location"),
    )


def _parse_routing(dct: Dict[str, Any]) -> RoutingSettings:
    defaults = RoutingSettings()
    return RoutingSettings(
        dct.get("baseUrl", defaults.base_url),
        dct.get("profile", defaults.profile),
        dct.get("timeoutSeconds", defaults.timeout_seconds),
        dct.get("retries", defaults.retries),
        dct.get("backoffFactor", defaults.backoff_factor),
    )


def parse_fleet_data(data: Dict[str, Any]) -> FleetConfig:
    """
    Build a FleetConfig from already-loaded fleet file data.

    Each section is parsed on its own, so location names never affect how
    the rest of the file is read.

    Raises:
        KeyError: a required vehicle or coordinate field is missing
        ValueError: a vehicle has an unknown kind
    """
    vehicles = json.loads(
        json.dumps(data.get("vehicles") or []), object_hook=_parse_vehicle_object
    )
    locations = {
        str(name): _parse_coordinate(coordinate)
        for name, coordinate in (data.get("locations") or {}).items()
    }
    routing = data.get("routing")
    return FleetConfig(
        vehicles, locations, _parse_routing(routing) if routing is not None else None
    )


def load_fleet_config(filename: Union[str, Path]) -> FleetConfig:
    """
    Load and validate a fleet file.

    Raises:
        jsonschema.ValidationError: the file does not match the fleet schema
    """
    with open(filename, "rb") as fp:
        data = yaml.load(fp, Loader=yaml.SafeLoader)
    validate(instance=data, schema=load_schema())
    return parse_fleet_data(data)


def populate_registry(
    config: FleetConfig, registry: Optional[FleetRegistry] = None
) -> FleetRegistry:
    """
    Register every vehicle of a fleet config and record its locations.

    Vehicle locations are stored under the vehicle's generated id; named
    locations keep their names. The configured routing client is installed
    only if the registry does not have one yet.
    """
    if registry is None:
        registry = FleetRegistry()

    for entry in config.entries:
        registry.register(entry.vehicle, entry.mileage_to_next_service)
        if entry.location is not None:
            registry.set_location(entry.vehicle.id, entry.location)

    for location_id, coordinate in config.locations.items():
        registry.set_location(location_id, coordinate)

    if config.routing is not None and registry.routing_client is None:
        registry.routing_client = config.routing.build_client()

    return registry


def load_fleet(
    filename: Union[str, Path], registry: Optional[FleetRegistry] = None
) -> FleetRegistry:
    """Load a fleet file into a registry (a new one unless given)."""
    return populate_registry(load_fleet_config(filename), registry)


def _write_locations(
    filename: Union[str, Path], locations: Dict[str, GeoCoordinate]
) -> None:
    """
    Merge named locations into a fleet YAML file.

    Loads the raw YAML, updates the locations section,
    and writes back to the file. Other sections are left untouched.
    """
    with open(filename, "r") as fp:
        data = yaml.load(fp, Loader=yaml.SafeLoader)

    if data.get("locations") is None:
        data["locations"] = {}

    for location_id, coordinate in locations.items():
        data["locations"][location_id] = {
            "latitude": coordinate.latitude,
            "longitude": coordinate.longitude,
        }

    with open(filename, "w") as fp:
        yaml.dump(
            data,
            fp,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            width=120,
        )


def save_location(
    filename: Union[str, Path], location_id: str, coordinate: GeoCoordinate
) -> None:
    """Add or replace a named location in a fleet YAML file."""
    _write_locations(filename, {location_id: coordinate})


def save_locations(filename: Union[str, Path], registry: FleetRegistry) -> None:
    """
    Write a registry's named locations into a fleet YAML file.

    Locations keyed by a registered vehicle's id are skipped: vehicle ids
    are assigned per process, so those entries would not match on reload.
    """
    vehicle_ids = {vehicle.id for vehicle in registry.vehicles}
    named = {
        location_id: coordinate
        for location_id, coordinate in registry.location_snapshot().items()
        if location_id not in vehicle_ids
    }
    _write_locations(filename, named)
