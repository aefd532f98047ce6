from designlab.parking.lot import GroundFloor, ParkingAdmin, ParkingDisplayDashboard
from designlab.parking.slot import VehicleType


def make_floor():
    floor = GroundFloor()
    floor.generate_parking()
    return floor


def test_generate_parking_counts_and_order():
    floor = make_floor()
    ids = [slot.slot_id for slot in floor.slots]
    assert len(ids) == floor.bike_slots + floor.car_slots + floor.truck_slots
    assert ids[0] == "B1"
    assert ids[-1] == "T" + str(floor.truck_slots)
    assert all(not slot.occupied for slot in floor.slots)


def test_generated_types_match_prefix():
    prefixes = {
        VehicleType.TWO_WHEELER: "B",
        VehicleType.FOUR_WHEELER: "C",
        VehicleType.TRUCK: "T",
    }
    for slot in make_floor().slots:
        assert slot.slot_id.startswith(prefixes[slot.vehicle_type])


def test_slots_table_lists_every_slot():
    floor = make_floor()
    table = floor.slots_table()
    lines = table.splitlines()
    assert lines[0] == " Parking Slots:"
    assert "Car Parking Slots:" in lines
    assert "Truck Parking Slots:" in lines
    for slot in floor.slots:
        assert f"{slot.slot_id:>10}{'No':>10}" in lines


def test_dashboard_filters_by_occupancy():
    floor = make_floor()
    floor.slots[0].occupied = True
    dashboard = ParkingDisplayDashboard(floor)
    occupied_lines = dashboard.slots_table(True).splitlines()
    free_lines = dashboard.slots_table(False).splitlines()
    assert "Bike Parking Slots:" in occupied_lines
    assert f"{'B1':>10}{'Yes':>10}" in occupied_lines
    assert not any(line.strip().startswith("B1") for line in free_lines)


def test_dashboard_full_message(capsys):
    floor = make_floor()
    dashboard = ParkingDisplayDashboard(floor)
    assert dashboard.is_full() is False
    floor.current_park_slots = floor.max_capacity
    assert dashboard.is_full() is True
    assert "Parking floor is Full!!!" in capsys.readouterr().out


def test_admin_generates_ground_floor():
    admin = ParkingAdmin()
    assert admin.ground_floor.slots == []
    admin.generate_parking()
    assert len(admin.ground_floor.slots) == admin.ground_floor.max_capacity