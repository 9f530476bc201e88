"""Vehicle variants: Car, Truck and Motorcycle."""

from abc import ABC, abstractmethod
from typing import Optional

from .errors import DivisionUndefined
from .identity import IdentityGenerator, next_id


def _fmt(value: float) -> str:
    """Format a number without a trailing .0 for whole values."""
    return str(int(value)) if float(value).is_integer() else str(value)


class Vehicle(ABC):
    """
    Common state for every fleet vehicle.

    Vehicles compare equal by identity only and sort by mileage.
    """

    kind = "vehicle"

    def __init__(
        self,
        make: str,
        model: str,
        mileage: float = 0,
        fuel_efficiency: float = 0,
        available: bool = True,
        id_generator: Optional[IdentityGenerator] = None,
    ):
        self._id = id_generator.next() if id_generator else next_id()
        self.make = make
        self.model = model
        self.mileage = float(mileage)
        self.fuel_efficiency = float(fuel_efficiency)
        self.available = available

    @property
    def id(self) -> str:
        return self._id

    @property
    def description(self) -> str:
        """Make and model, e.g. "Toyota Camry"."""
        return f"{self.make} {self.model}"

    @abstractmethod
    def describe(self) -> str:
        """Human-readable summary including the variant's own fields."""

    def is_available(self) -> bool:
        return self.available

    def analyze_usage_efficiency(self) -> float:
        """
        Total fuel consumed over the vehicle's life: mileage / fuel_efficiency.

        Raises:
            DivisionUndefined: fuel_efficiency is zero
        """
        if self.fuel_efficiency == 0:
            raise DivisionUndefined(
                f"Vehicle {self.id} has zero fuel efficiency; usage is undefined"
            )
        return self.mileage / self.fuel_efficiency

    def add_mileage(self, delta: float) -> "Vehicle":
        """Add positive mileage; zero or negative deltas are ignored."""
        if delta > 0:
            self.mileage += delta
        return self

    def __iadd__(self, delta: float) -> "Vehicle":
        return self.add_mileage(delta)

    def assign_from(self, other: "Vehicle") -> "Vehicle":
        """Copy every field of ``other``, identity included, onto this vehicle."""
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot assign {type(other).__name__} to {type(self).__name__}"
            )
        self.__dict__.update(other.__dict__)
        return self

    def equals_by_id(self, other: "Vehicle") -> bool:
        return self.id == other.id

    def compare_by_mileage(self, other: "Vehicle") -> int:
        """Return -1, 0 or 1 as this vehicle's mileage is lower, equal or higher."""
        if self.mileage < other.mileage:
            return -1
        if self.mileage > other.mileage:
            return 1
        return 0

    def __eq__(self, other):
        if not isinstance(other, Vehicle):
            return NotImplemented
        return self.equals_by_id(other)

    def __hash__(self):
        return hash(self.id)

    def __lt__(self, other):
        if not isinstance(other, Vehicle):
            return NotImplemented
        return self.compare_by_mileage(other) < 0

    def __le__(self, other):
        if not isinstance(other, Vehicle):
            return NotImplemented
        return self.compare_by_mileage(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Vehicle):
            return NotImplemented
        return self.compare_by_mileage(other) > 0

    def __ge__(self, other):
        if not isinstance(other, Vehicle):
            return NotImplemented
        return self.compare_by_mileage(other) >= 0

    def _usage_summary(self) -> str:
        return (
            f"Mileage: {_fmt(self.mileage)} km, "
            f"Efficiency: {_fmt(self.fuel_efficiency)} km/l"
        )

    def to_display_string(self) -> str:
        return (
            f"ID: {self.id}, Model: {self.description}, {self._usage_summary()}, "
            f"Available: {'Yes' if self.available else 'No'}"
        )

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id} {self.description!r}>"


class Car(Vehicle):
    """Passenger car."""

    kind = "car"

    def __init__(
        self,
        make: str,
        model: str,
        mileage: float = 0,
        fuel_efficiency: float = 0,
        passenger_capacity: int = 0,
        **kwargs,
    ):
        super().__init__(make, model, mileage, fuel_efficiency, **kwargs)
        self.passenger_capacity = passenger_capacity

    def describe(self) -> str:
        return (
            f"Car: {self.description} (Passengers: {self.passenger_capacity}, "
            f"{self._usage_summary()})"
        )


class Truck(Vehicle):
    """Cargo truck; load capacity in tonnes."""

    kind = "truck"

    def __init__(
        self,
        make: str,
        model: str,
        mileage: float = 0,
        fuel_efficiency: float = 0,
        load_capacity: float = 0,
        **kwargs,
    ):
        super().__init__(make, model, mileage, fuel_efficiency, **kwargs)
        self.load_capacity = float(load_capacity)

    def describe(self) -> str:
        return (
            f"Truck: {self.description} (Capacity: {_fmt(self.load_capacity)} t, "
            f"{self._usage_summary()})"
        )


class Motorcycle(Vehicle):
    """Motorcycle; ``type`` is a category such as sport, cruiser or touring."""

    kind = "motorcycle"

    def __init__(
        self,
        make: str,
        model: str,
        mileage: float = 0,
        fuel_efficiency: float = 0,
        type: str = "Generic",
        cylinder_count: int = 0,
        **kwargs,
    ):
        super().__init__(make, model, mileage, fuel_efficiency, **kwargs)
        self.type = type
        self.cylinder_count = cylinder_count

    def describe(self) -> str:
        return (
            f"Motorcycle: {self.description} (Type: {self.type}, "
            f"Cylinders: {self.cylinder_count}, {self._usage_summary()})"
        )


VEHICLE_KINDS = {cls.kind: cls for cls in (Car, Truck, Motorcycle)}


def make_vehicle(kind: str, **fields) -> Vehicle:
    """Create a vehicle of the given kind ("car", "truck" or "motorcycle")."""
    try:
        cls = VEHICLE_KINDS[kind.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown vehicle kind '{kind}' (expected one of: {', '.join(VEHICLE_KINDS)})"
        ) from None
    return cls(**fields)
