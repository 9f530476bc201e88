"""MaintenanceState enum for per-vehicle service state."""

from enum import Enum


class MaintenanceState(Enum):
    """Service state of a registered vehicle."""

    OK = "OK"
    SERVICE_DUE = "Needs Maintenance"

    @property
    def label(self) -> str:
        return self.value
