"""
Fleet tracking models.

This package provides the fleet registry and its collaborators:
- IdentityGenerator: process-unique vehicle ids
- GeoCoordinate: latitude/longitude with great-circle distance
- Vehicle: Car, Truck and Motorcycle variants
- MaintenanceScheduler: per-vehicle service countdowns
- FleetRegistry: vehicles, locations, maintenance and route building
- OsrmRoutingClient: HTTP routing collaborator
"""

from .errors import (
    FleetError,
    SourceUnavailable,
    MalformedData,
    UnknownLocation,
    RoutingUnavailable,
    OutputWriteFailed,
    DivisionUndefined,
)
from .identity import IdentityGenerator, next_id
from .location import GeoCoordinate
from .vehicle import Vehicle, Car, Truck, Motorcycle, make_vehicle
from .status import MaintenanceState
from .maintenance import MaintenanceRecord, MaintenanceScheduler
from .routing import RoutingClient, OsrmRoutingClient, RoutingSettings
from .export import write_route
from .registry import FleetRegistry, get_shared_registry
from .loader import (
    FleetConfig,
    FleetEntry,
    load_fleet,
    load_fleet_config,
    parse_fleet_data,
    populate_registry,
    save_location,
    save_locations,
)

__all__ = [
    "FleetError",
    "SourceUnavailable",
    "MalformedData",
    "UnknownLocation",
    "RoutingUnavailable",
    "OutputWriteFailed",
    "DivisionUndefined",
    "IdentityGenerator",
    "next_id",
    "GeoCoordinate",
    "Vehicle",
    "Car",
    "Truck",
    "Motorcycle",
    "make_vehicle",
    "MaintenanceState",
    "MaintenanceRecord",
    "MaintenanceScheduler",
    "RoutingClient",
    "OsrmRoutingClient",
    "RoutingSettings",
    "write_route",
    "FleetRegistry",
    "get_shared_registry",
    "FleetConfig",
    "FleetEntry",
    "load_fleet",
    "load_fleet_config",
    "parse_fleet_data",
    "populate_registry",
    "save_location",
    "save_locations",
]
