"""Vehicles and the parking slots they occupy."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum


class VehicleType(IntEnum):
    TWO_WHEELER = 0
    FOUR_WHEELER = 1
    TRUCK = 2


@dataclass
class Vehicle:
    """A vehicle identified by its registration number."""

    reg_no: str
    vehicle_type: VehicleType


@dataclass
class Bike(Vehicle):
    vehicle_type: VehicleType = VehicleType.TWO_WHEELER


@dataclass
class Car(Vehicle):
    vehicle_type: VehicleType = VehicleType.FOUR_WHEELER


class ParkingSlot(ABC):
    """A slot on a floor that holds one vehicle of a fixed type."""

    def __init__(self, slot_id: str, occupied: bool = False, floor_no: int = 0) -> None:
        self.slot_id = slot_id
        self.occupied = occupied
        self.floor_no = floor_no

    @property
    @abstractmethod
    def vehicle_type(self) -> VehicleType:
        """The kind of vehicle this slot takes."""

    def park_vehicle(self) -> bool:
        """Mark the slot occupied; return False if it already was."""
        if self.occupied:
            print(f"Slot {self.slot_id} is already occupied")
            return False
        self.occupied = True
        print(f"Vehicle with type parked in slot {int(self.vehicle_type)}{self.slot_id}")
        return True

    def release(self) -> bool:
        """Mark the slot vacant; return False if it already was."""
        if not self.occupied:
            print(f"Slot {self.slot_id} is already vacant")
            return False
        self.occupied = False
        print(f"Vehicle released from slot {self.slot_id}")
        return True

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(slot_id={self.slot_id!r}, "
            f"occupied={self.occupied!r}, floor_no={self.floor_no!r})"
        )


class BikeParkingSlot(ParkingSlot):
    vehicle_type = VehicleType.TWO_WHEELER


class CarParkingSlot(ParkingSlot):
    vehicle_type = VehicleType.FOUR_WHEELER


class TruckParkingSlot(ParkingSlot):
    vehicle_type = VehicleType.TRUCK