"""Parking floors, their administration and their display dashboard."""

from __future__ import annotations

from typing import Callable, List

from designlab.parking.slot import (
    BikeParkingSlot,
    CarParkingSlot,
    ParkingSlot,
    TruckParkingSlot,
    VehicleType,
)

_HEADER = f"{'Slot ID':>10}{'Occupied':>10}"


def _rows(
    slots: List[ParkingSlot],
    vehicle_type: VehicleType,
    keep: Callable[[ParkingSlot], bool],
) -> List[str]:
    return [
        f"{slot.slot_id:>10}{'Yes' if slot.occupied else 'No':>10}"
        for slot in slots
        if slot.vehicle_type == vehicle_type and keep(slot)
    ]


def _table(slots: List[ParkingSlot], keep: Callable[[ParkingSlot], bool], bike_title: bool) -> str:
    lines = [" Parking Slots:", _HEADER]
    if bike_title:
        lines += ["", "Bike Parking Slots:"]
    lines += _rows(slots, VehicleType.TWO_WHEELER, keep)
    lines += ["", "Car Parking Slots:", _HEADER]
    lines += _rows(slots, VehicleType.FOUR_WHEELER, keep)
    lines += ["", "Truck Parking Slots:", _HEADER]
    lines += _rows(slots, VehicleType.TRUCK, keep)
    return "\n".join(lines) + "\n"


class ParkingLot:
    """A floor with a fixed number of slots per vehicle type."""

    def __init__(
        self,
        max_capacity: int = 10,
        car_slots: int = 4,
        bike_slots: int = 4,
        truck_slots: int = 2,
        floor_no: int = 0,
    ) -> None:
        self.max_capacity = max_capacity
        self.car_slots = car_slots
        self.bike_slots = bike_slots
        self.truck_slots = truck_slots
        self.floor_no = floor_no
        self.current_park_slots = 0
        self.slots: List[ParkingSlot] = []


class GroundFloor(ParkingLot):
    def generate_parking(self) -> None:
        """Add bike slots B1.., car slots C1.. and truck slots T1.., in that order."""
        for prefix, count, cls in (
            ("B", self.bike_slots, BikeParkingSlot),
            ("C", self.car_slots, CarParkingSlot),
            ("T", self.truck_slots, TruckParkingSlot),
        ):
            self.slots.extend(cls(f"{prefix}{i}", False, 0) for i in range(1, count + 1))

    def slots_table(self) -> str:
        """Return every slot grouped by vehicle type."""
        return _table(self.slots, lambda slot: True, bike_title=False)

    def print_parking_slots(self) -> str:
        """Print the table of every slot and return it."""
        table = self.slots_table()
        print(table, end="")
        return table


class ParkingAdmin:
    """Owns the ground floor and sets up its slots."""

    def __init__(self) -> None:
        self.ground_floor = GroundFloor()

    def generate_parking(self) -> None:
        self.ground_floor.generate_parking()


class ParkingDisplayDashboard:
    """Shows slot availability of one floor."""

    def __init__(self, lot: ParkingLot) -> None:
        self.lot = lot

    def slots_table(self, occupied: bool) -> str:
        """Return the slots whose occupied flag equals ``occupied``."""
        return _table(self.lot.slots, lambda slot: slot.occupied == occupied, bike_title=True)

    def display_slots(self, occupied: bool) -> str:
        """Print the table of matching slots and return it."""
        table = self.slots_table(occupied)
        print(table, end="")
        return table

    def is_full(self) -> bool:
        """Whether the floor holds as many vehicles as its capacity."""
        if self.lot.current_park_slots == self.lot.max_capacity:
            print("\nParking floor is Full!!!")
            return True
        return False