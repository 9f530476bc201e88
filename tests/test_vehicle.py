#!/usr/bin/env python3
"""
Tests for Vehicle variants.

Covers the contracts shared by Car, Truck and Motorcycle:
1. Identity - assigned once, unique, and the only basis for equality
2. Usage efficiency - mileage / fuel efficiency, error on zero efficiency
3. Mileage accumulation - only positive deltas count
4. Ordering - by mileage ascending
"""

import pytest

from fleet import (
    Car,
    DivisionUndefined,
    IdentityGenerator,
    Motorcycle,
    Truck,
    Vehicle,
    make_vehicle,
)


@pytest.fixture
def car():
    return Car("Toyota", "Camry", 12000, 12.0, 5)


@pytest.fixture
def truck():
    return Truck("Volvo", "FH16", 80000, 5.0, 20.0)


@pytest.fixture
def bike():
    return Motorcycle("Yamaha", "YZF-R6", 15000, 18.0, "Sport", 4)


# =============================================================================
# Identity and equality
# =============================================================================


class TestVehicleIdentity:
    """Tests for vehicle identity and equality."""

    def test_ids_are_prefixed_and_distinct(self, car, truck, bike):
        assert car.id.startswith("V")
        assert truck.id.startswith("V")
        assert bike.id.startswith("V")
        assert len({car.id, truck.id, bike.id}) == 3

    def test_injected_generator(self):
        gen = IdentityGenerator(prefix="X")
        assert Car("A", "B", id_generator=gen).id == "X1"
        assert Truck("C", "D", id_generator=gen).id == "X2"

    def test_id_is_read_only(self, car):
        with pytest.raises(AttributeError):
            car.id = "V999"

    def test_identical_fields_different_ids_are_unequal(self):
        first = Car("Honda", "Civic", 5000, 15.0, 4)
        second = Car("Honda", "Civic", 5000, 15.0, 4)
        assert first != second
        assert not first.equals_by_id(second)

    def test_assign_from_makes_equal_by_identity(self, car):
        """Copy-assignment carries identity and every field across."""
        car.add_mileage(500)
        other = Car("Honda", "Civic", 5000, 15.0, 4)
        assert car != other

        other.assign_from(car)

        assert car == other
        assert car.equals_by_id(other)
        assert other.description == "Toyota Camry"
        assert other.passenger_capacity == 5
        assert other.analyze_usage_efficiency() == car.analyze_usage_efficiency()

    def test_assign_from_other_variant_rejected(self, car, truck):
        with pytest.raises(TypeError):
            car.assign_from(truck)

    def test_equal_vehicles_share_hash(self, car):
        other = Car("Honda", "Civic", 5000, 15.0, 4)
        other.assign_from(car)
        assert len({car, other}) == 1

    def test_not_equal_to_non_vehicle(self, car):
        assert car != car.id


# =============================================================================
# Usage efficiency and mileage
# =============================================================================


class TestUsageEfficiency:
    """Tests for analyze_usage_efficiency."""

    def test_values_per_variant(self, car, truck, bike):
        assert car.analyze_usage_efficiency() == 1000
        assert truck.analyze_usage_efficiency() == 16000
        assert bike.analyze_usage_efficiency() == pytest.approx(833.33, abs=0.01)

    def test_after_adding_mileage(self, car, truck, bike):
        car.add_mileage(500)
        truck += 1500
        bike.add_mileage(100)
        assert car.analyze_usage_efficiency() == pytest.approx(1041.67, abs=0.01)
        assert truck.analyze_usage_efficiency() == 16300
        assert 838 < bike.analyze_usage_efficiency() < 839

    def test_zero_efficiency_raises(self):
        car = Car("Lada", "Niva", 1000, 0, 4)
        with pytest.raises(DivisionUndefined):
            car.analyze_usage_efficiency()

    def test_zero_efficiency_is_a_zero_division_error(self):
        car = Car("Lada", "Niva", 1000, 0, 4)
        with pytest.raises(ZeroDivisionError):
            car.analyze_usage_efficiency()


class TestAddMileage:
    """Tests for mileage accumulation."""

    @pytest.mark.parametrize("delta", [0, -1, -500.5])
    def test_non_positive_delta_is_ignored(self, car, delta):
        car.add_mileage(delta)
        assert car.mileage == 12000

    @pytest.mark.parametrize("delta", [0.5, 1, 250, 10000])
    def test_positive_delta_adds_exactly(self, car, delta):
        car.add_mileage(delta)
        assert car.mileage == 12000 + delta

    def test_iadd_operator(self, car):
        car += 300
        car += -300
        assert car.mileage == 12300

    def test_chainable(self, car):
        assert car.add_mileage(1).add_mileage(2) is car
        assert car.mileage == 12003


# =============================================================================
# Ordering
# =============================================================================


class TestOrdering:
    """Tests for ordering by mileage."""

    def test_sorted_by_mileage(self, car, truck, bike):
        ordered = sorted([car, truck, bike])
        assert [v.mileage for v in ordered] == [12000, 15000, 80000]

    def test_less_than(self, car, truck):
        assert car < truck
        assert not truck < car

    def test_compare_by_mileage(self, car, truck):
        twin = Car("Toyota", "Corolla", 12000, 14.0, 5)
        assert car.compare_by_mileage(truck) == -1
        assert truck.compare_by_mileage(car) == 1
        assert car.compare_by_mileage(twin) == 0
        assert car != twin

    def test_full_comparison_set(self, car, truck):
        assert car <= truck
        assert truck > car
        assert truck >= car
        assert not car > truck
        assert not car >= truck
        assert not truck <= car

    def test_equal_mileage_ties(self, car):
        twin = Car("Toyota", "Corolla", 12000, 14.0, 5)
        assert car <= twin and car >= twin
        assert twin <= car and twin >= car
        assert not car < twin and not car > twin

    def test_max_by_mileage(self, car, truck, bike):
        assert max([car, truck, bike]) is truck
        assert min([truck, bike, car]) is car

    @pytest.mark.parametrize("op", ["__le__", "__gt__", "__ge__", "__lt__"])
    def test_comparison_with_non_vehicle(self, car, op):
        assert getattr(car, op)(12000) is NotImplemented


# =============================================================================
# Description
# =============================================================================


class TestDescribe:
    """Tests for describe and display strings."""

    def test_car_describe(self, car):
        assert car.describe() == (
            "Car: Toyota Camry (Passengers: 5, Mileage: 12000 km, Efficiency: 12 km/l)"
        )

    def test_truck_describe(self, truck):
        assert truck.describe() == (
            "Truck: Volvo FH16 (Capacity: 20 t, Mileage: 80000 km, Efficiency: 5 km/l)"
        )

    def test_motorcycle_describe(self, bike):
        assert bike.describe() == (
            "Motorcycle: Yamaha YZF-R6 (Type: Sport, Cylinders: 4, "
            "Mileage: 15000 km, Efficiency: 18 km/l)"
        )

    def test_display_string(self, car):
        assert str(car) == (
            f"ID: {car.id}, Model: Toyota Camry, Mileage: 12000 km, "
            "Efficiency: 12 km/l, Available: Yes"
        )

    def test_display_string_unavailable(self, car):
        car.available = False
        assert car.to_display_string().endswith("Available: No")
        assert car.is_available() is False

    def test_fractional_values_kept(self):
        car = Car("Toyota", "Prius", 1000.5, 22.5, 5)
        assert "Mileage: 1000.5 km" in car.describe()
        assert "Efficiency: 22.5 km/l" in car.describe()

    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError):
            Vehicle("Generic", "Vehicle")


class TestMakeVehicle:
    """Tests for the make_vehicle factory."""

    def test_builds_each_kind(self):
        car = make_vehicle("car", make="Toyota", model="Camry", passenger_capacity=5)
        truck = make_vehicle("Truck", make="Volvo", model="FH16", load_capacity=20)
        bike = make_vehicle(
            "motorcycle", make="Yamaha", model="R6", type="Sport", cylinder_count=4
        )
        assert isinstance(car, Car) and car.passenger_capacity == 5
        assert isinstance(truck, Truck) and truck.load_capacity == 20
        assert isinstance(bike, Motorcycle) and bike.type == "Sport"

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown vehicle kind 'boat'"):
            make_vehicle("boat", make="X", model="Y")
