"""Walk through a full visit to the parking floor: entry, ticket, exit, payment."""

from __future__ import annotations

from typing import Optional, Tuple

from designlab.parking.attendant import EntryManager, ExitManager
from designlab.parking.lot import GroundFloor, ParkingAdmin, ParkingDisplayDashboard
from designlab.parking.parking_ticket import Ticket
from designlab.parking.payment import PaymentMode
from designlab.parking.slot import Car, VehicleType

TICKET_ID = "TKT1"
DEMO_REG_NO = "XX00 XX0000"


def run_demo() -> Tuple[GroundFloor, Optional[Ticket]]:
    """Park a car in the first bike slot, process it at the exit, free the slot.

    Returns the floor and the ticket handled at the exit (None when the floor
    was already full and nothing was parked).
    """
    admin = ParkingAdmin()
    admin.generate_parking()
    floor = admin.ground_floor
    floor.print_parking_slots()

    dashboard = ParkingDisplayDashboard(floor)
    dashboard.display_slots(False)

    entry = EntryManager(floor)
    exit_manager = ExitManager(floor)

    if dashboard.is_full():
        return floor, None

    slot = entry.get_free_slot(VehicleType.TWO_WHEELER)
    vehicle = Car(DEMO_REG_NO, VehicleType.FOUR_WHEELER)
    entry.create_ticket(slot, vehicle)

    dashboard.display_slots(True)

    ticket = entry.ticket_details(TICKET_ID)
    if ticket is None:
        raise LookupError(f"no ticket with id {TICKET_ID}")
    print(f"Ticket Status: {int(ticket.status)}")
    ticket.set_exit_time()

    exit_manager.tickets = entry.tickets
    exit_ticket = exit_manager.ticket_details(TICKET_ID)
    if exit_ticket is not None:
        print(f"Ticket ID: {exit_ticket.ticket_id}")
        print(f"Ticket Status: {int(ticket.status)}")
        print(f"Slot ID: {exit_ticket.slot_id}")
        print(f"Vehile Reg no: {exit_ticket.vehicle.reg_no}", end="")
        print(f" Vehicle Type: {int(exit_ticket.vehicle.vehicle_type)}")
        print(f"Parking duration: {exit_ticket.duration_minutes()} minutes")
        print(f"Cost of ticket: {exit_ticket.estimate_cost()} rupees")
        print("Payment: ")
        exit_ticket.do_payment(PaymentMode.ONLINEAPP, exit_ticket.estimate_cost())

    released = exit_manager.find_slot("B1")
    print(f"\nCurrent Park slots are {floor.current_park_slots}")
    if released is None:
        raise LookupError("slot B1 does not exist")
    released.release()
    return floor, exit_ticket


def main(argv: Optional[list] = None) -> int:
    run_demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())