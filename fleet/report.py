"""Tabular text reports for vehicles and maintenance state."""

from typing import Iterable, List, Optional, Sequence, Tuple

from tabulate import tabulate

from .status import MaintenanceState


def format_mileage(mileage: Optional[float]) -> str:
    """Format mileage for display."""
    return f"{mileage:,.0f}" if mileage is not None else "-"


def format_efficiency(efficiency: Optional[float]) -> str:
    """Format fuel efficiency (km/l) for display."""
    return f"{efficiency:.1f}" if efficiency is not None else "-"


def format_remaining(remaining: Optional[int]) -> str:
    """Format remaining mileage; overdue values keep their minus sign."""
    if remaining is None:
        return "-"
    return f"{remaining:,}"


def make_vehicle_table(vehicles: Iterable) -> List[List[str]]:
    """Convert vehicles to table rows."""
    rows = []
    for vehicle in vehicles:
        rows.append(
            [
                vehicle.id,
                vehicle.kind,
                vehicle.description,
                format_mileage(vehicle.mileage),
                format_efficiency(vehicle.fuel_efficiency),
                "Yes" if vehicle.is_available() else "No",
            ]
        )
    return rows


def make_status_table(
    report: Iterable[Tuple[str, MaintenanceState]], scheduler=None
) -> List[List[str]]:
    """
    Convert a maintenance status report to table rows.

    When a scheduler is given, a remaining-mileage column is filled from its
    records.
    """
    rows = []
    for vehicle_id, state in report:
        record = scheduler.get_record(vehicle_id) if scheduler is not None else None
        rows.append(
            [
                vehicle_id,
                state.label,
                format_remaining(record.remaining_mileage if record else None),
            ]
        )
    return rows


def render_table(rows: List[List[str]], headers: Sequence[str]) -> str:
    return tabulate(rows, headers=headers, tablefmt="simple")
