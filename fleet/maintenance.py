"""MaintenanceScheduler: mileage-based service tracking per vehicle id."""

import logging
import threading
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Tuple

from .status import MaintenanceState

logger = logging.getLogger(__name__)


@dataclass
class MaintenanceRecord:
    """Remaining mileage until service and whether service is due."""

    remaining_mileage: int
    service_due: bool = False

    @property
    def state(self) -> MaintenanceState:
        return MaintenanceState.SERVICE_DUE if self.service_due else MaintenanceState.OK


class MaintenanceScheduler:
    """
    Tracks a MaintenanceRecord per vehicle id.

    Each record is a two-state machine (OK -> SERVICE_DUE -> OK). Mileage
    recorded against a vehicle counts down its threshold; once the threshold
    reaches zero or below the vehicle stays due until service is completed.
    Operations on unregistered ids are silent no-ops.
    """

    def __init__(self):
        self._records: Dict[str, MaintenanceRecord] = {}
        self._lock = threading.RLock()

    def register(self, vehicle_id: str, mileage_to_next_service: int) -> None:
        """Start tracking a vehicle; re-registering replaces its record."""
        with self._lock:
            self._records[vehicle_id] = MaintenanceRecord(int(mileage_to_next_service))

    def record_mileage(self, vehicle_id: str, mileage: int) -> None:
        """Count down the vehicle's threshold by the miles driven."""
        with self._lock:
            record = self._records.get(vehicle_id)
            if record is None:
                return
            record.remaining_mileage -= int(mileage)
            if record.remaining_mileage <= 0:
                record.service_due = True

    def is_service_due(self, vehicle_id: str) -> bool:
        with self._lock:
            record = self._records.get(vehicle_id)
            return record.service_due if record else False

    def complete_service(self, vehicle_id: str, mileage_to_next_service: int) -> None:
        """Mark service done and start a new countdown."""
        with self._lock:
            record = self._records.get(vehicle_id)
            if record is None:
                return
            record.service_due = False
            record.remaining_mileage = int(mileage_to_next_service)
        logger.info("Maintenance completed for vehicle %s", vehicle_id)

    def get_record(self, vehicle_id: str) -> Optional[MaintenanceRecord]:
        """Return a copy of the vehicle's record, or None if unregistered."""
        with self._lock:
            record = self._records.get(vehicle_id)
            return replace(record) if record else None

    def status_report(self) -> List[Tuple[str, MaintenanceState]]:
        """Snapshot of (id, state) for every registered vehicle, in registration order."""
        with self._lock:
            return [(vid, record.state) for vid, record in self._records.items()]

    def __contains__(self, vehicle_id: str) -> bool:
        with self._lock:
            return vehicle_id in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
