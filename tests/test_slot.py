import pytest

from designlab.parking.slot import (
    Bike,
    BikeParkingSlot,
    Car,
    CarParkingSlot,
    ParkingSlot,
    TruckParkingSlot,
    Vehicle,
    VehicleType,
)


def test_slot_types():
    assert BikeParkingSlot("B1").vehicle_type is VehicleType.TWO_WHEELER
    assert CarParkingSlot("C1").vehicle_type is VehicleType.FOUR_WHEELER
    assert TruckParkingSlot("T1").vehicle_type is VehicleType.TRUCK


def test_base_slot_is_abstract():
    with pytest.raises(TypeError):
        ParkingSlot("X1")


def test_park_and_release_round_trip():
    slot = CarParkingSlot("C1", False, 0)
    assert slot.park_vehicle() is True
    assert slot.occupied is True
    assert slot.release() is True
    assert slot.occupied is False


def test_park_twice_reports_occupied(capsys):
    slot = BikeParkingSlot("B1")
    slot.park_vehicle()
    capsys.readouterr()
    assert slot.park_vehicle() is False
    assert capsys.readouterr().out == "Slot B1 is already occupied\n"
    assert slot.occupied is True


def test_release_vacant_slot(capsys):
    slot = TruckParkingSlot("T1")
    assert slot.release() is False
    assert capsys.readouterr().out == "Slot T1 is already vacant\n"


def test_park_message(capsys):
    BikeParkingSlot("B1").park_vehicle()
    assert capsys.readouterr().out == "Vehicle with type parked in slot 0B1\n"


def test_vehicle_defaults():
    assert Bike("AB00 XY0000").vehicle_type is VehicleType.TWO_WHEELER
    assert Car("AB00 XY0000").vehicle_type is VehicleType.FOUR_WHEELER
    assert Vehicle("AB00 XY0000", VehicleType.TRUCK).vehicle_type is VehicleType.TRUCK


def test_constructor_keeps_fields():
    slot = CarParkingSlot("C3", True, 2)
    assert (slot.slot_id, slot.occupied, slot.floor_no) == ("C3", True, 2)