"""FleetRegistry - the authoritative collection of vehicles and locations."""

import logging
import threading
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from .errors import UnknownLocation
from .export import write_route
from .location import GeoCoordinate
from .maintenance import MaintenanceScheduler
from .report import make_status_table, make_vehicle_table, render_table
from .routing import OsrmRoutingClient, RoutingClient
from .status import MaintenanceState
from .vehicle import Vehicle

logger = logging.getLogger(__name__)

_shared_registry: Optional["FleetRegistry"] = None
_shared_lock = threading.Lock()


class FleetRegistry:
    """
    Owns the fleet's vehicles, their known locations and their maintenance
    schedule, and requests routes between known locations.

    Mutations of the vehicle list, scheduler and location lookup happen under
    one lock. Route fetching and writing run outside it, so slow routing calls
    never block registration or mileage updates.
    """

    def __init__(
        self,
        scheduler: Optional[MaintenanceScheduler] = None,
        routing_client: Optional[RoutingClient] = None,
    ):
        self._vehicles: List[Vehicle] = []
        self._locations: Dict[str, GeoCoordinate] = {}
        self.scheduler = scheduler or MaintenanceScheduler()
        self.routing_client = routing_client
        self._lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "FleetRegistry":
        """Return the process-wide registry, creating it on first use."""
        return get_shared_registry()

    # -------------------------------------------------------------------------
    # Vehicles
    # -------------------------------------------------------------------------

    def register(self, vehicle: Vehicle, mileage_to_next_service: int) -> None:
        """Add a vehicle to the fleet and start its maintenance countdown."""
        with self._lock:
            self._vehicles.append(vehicle)
            self.scheduler.register(vehicle.id, mileage_to_next_service)
        logger.info("Added: %s", vehicle)

    @property
    def vehicles(self) -> List[Vehicle]:
        """Snapshot of registered vehicles in insertion order."""
        with self._lock:
            return list(self._vehicles)

    def find_vehicle(self, vehicle_id: str) -> Optional[Vehicle]:
        with self._lock:
            for vehicle in self._vehicles:
                if vehicle.id == vehicle_id:
                    return vehicle
        return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._vehicles)

    # -------------------------------------------------------------------------
    # Locations
    # -------------------------------------------------------------------------

    @property
    def locations(self) -> Dict[str, GeoCoordinate]:
        """
        The live id -> GeoCoordinate mapping.

        Callers may read and assign entries directly. Direct writes bypass the
        registry lock; use set_location() from concurrent code.
        """
        return self._locations

    def set_location(self, location_id: str, coordinate: GeoCoordinate) -> None:
        with self._lock:
            self._locations[location_id] = coordinate

    def get_location(self, location_id: str) -> Optional[GeoCoordinate]:
        with self._lock:
            return self._locations.get(location_id)

    def location_snapshot(self) -> Dict[str, GeoCoordinate]:
        """Copy of the location mapping taken under the registry lock."""
        with self._lock:
            return dict(self._locations)

    def _resolve(self, start_id: str, end_id: str) -> Tuple[GeoCoordinate, GeoCoordinate]:
        with self._lock:
            missing = [i for i in (start_id, end_id) if i not in self._locations]
            if missing:
                raise UnknownLocation(dict.fromkeys(missing))
            return self._locations[start_id], self._locations[end_id]

    # -------------------------------------------------------------------------
    # Routing
    # -------------------------------------------------------------------------

    def _routing(self) -> RoutingClient:
        with self._lock:
            if self.routing_client is None:
                self.routing_client = OsrmRoutingClient()
            return self.routing_client

    def build_route(
        self, start_id: str, end_id: str, output_path: Union[str, Path]
    ) -> None:
        """
        Fetch a driving route between two known locations and save it.

        The routing service's response is written verbatim to output_path.

        Raises:
            UnknownLocation: either id has no location (nothing is written)
            RoutingUnavailable: the routing service failed
            OutputWriteFailed: output_path could not be written
        """
        start, end = self._resolve(start_id, end_id)

        payload = self._routing().fetch_route(
            start.to_canonical_string(), end.to_canonical_string()
        )

        write_route(output_path, payload)
        logger.info("Route between %s and %s saved to %s", start_id, end_id, output_path)

    # -------------------------------------------------------------------------
    # Maintenance
    # -------------------------------------------------------------------------

    def update_mileage(self, vehicle_id: str, mileage: int) -> None:
        with self._lock:
            self.scheduler.record_mileage(vehicle_id, mileage)

    def needs_maintenance(self, vehicle_id: str) -> bool:
        return self.scheduler.is_service_due(vehicle_id)

    def perform_maintenance(self, vehicle_id: str, mileage_to_next_service: int) -> None:
        with self._lock:
            self.scheduler.complete_service(vehicle_id, mileage_to_next_service)

    def maintenance_status(self) -> List[Tuple[str, MaintenanceState]]:
        return self.scheduler.status_report()

    # -------------------------------------------------------------------------
    # Reports
    # -------------------------------------------------------------------------

    def vehicle_table(self) -> str:
        """All vehicles as a text table."""
        return render_table(
            make_vehicle_table(self.vehicles),
            ["ID", "Kind", "Model", "Mileage (km)", "Efficiency (km/l)", "Available"],
        )

    def maintenance_table(self) -> str:
        """Maintenance state of every registered vehicle as a text table."""
        return render_table(
            make_status_table(self.maintenance_status(), self.scheduler),
            ["ID", "Status", "Remaining (km)"],
        )


def get_shared_registry() -> FleetRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _shared_registry
    if _shared_registry is None:
        with _shared_lock:
            if _shared_registry is None:
                _shared_registry = FleetRegistry()
    return _shared_registry
