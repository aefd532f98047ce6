"""Attendants at the entry and exit of a parking floor."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from designlab.parking.lot import ParkingLot
from designlab.parking.parking_ticket import Ticket
from designlab.parking.slot import ParkingSlot, Vehicle, VehicleType


class ParkingAttendant(ABC):
    """Works on one floor and keeps the tickets it knows about."""

    def __init__(self, floor: ParkingLot) -> None:
        self.floor = floor
        self.tickets: List[Ticket] = []

    def find_slot(self, slot_id: str) -> Optional[ParkingSlot]:
        """Return the slot with ``slot_id``, or None."""
        return next((slot for slot in self.floor.slots if slot.slot_id == slot_id), None)

    def _find_ticket(self, ticket_id: str) -> Optional[Ticket]:
        return next((t for t in self.tickets if t.ticket_id == ticket_id), None)

    @abstractmethod
    def get_free_slot(self, vehicle_type: VehicleType) -> Optional[ParkingSlot]:
        """Reserve and return a free slot for ``vehicle_type``, if any."""

    @abstractmethod
    def create_ticket(self, slot: Optional[ParkingSlot], vehicle: Vehicle) -> Optional[Ticket]:
        """Handle the ticket for ``vehicle`` in ``slot``."""

    @abstractmethod
    def ticket_details(self, ticket_id: str) -> Optional[Ticket]:
        """Look up a ticket and update its status."""


class EntryManager(ParkingAttendant):
    def get_free_slot(self, vehicle_type: VehicleType) -> Optional[ParkingSlot]:
        """Mark the first free slot of the type occupied and count it."""
        for slot in self.floor.slots:
            if not slot.occupied and slot.vehicle_type == vehicle_type:
                slot.occupied = True
                self.floor.current_park_slots += 1
                return slot
        return None

    def create_ticket(self, slot: Optional[ParkingSlot], vehicle: Vehicle) -> Optional[Ticket]:
        """Issue a ticket for ``slot``; None when no slot was found."""
        if slot is None:
            print("No free parking slot available for the given vehicle type.")
            return None
        ticket = Ticket(slot.slot_id, vehicle)
        self.tickets.append(ticket)
        slot.park_vehicle()
        print(f"Ticket created for slot {slot.slot_id}")
        print(f"Ticket ID: {ticket.ticket_id}")
        return ticket

    def ticket_details(self, ticket_id: str) -> Optional[Ticket]:
        """Return the ticket, marked active."""
        ticket = self._find_ticket(ticket_id)
        if ticket is not None:
            ticket.set_status("A")
        return ticket


class ExitManager(ParkingAttendant):
    def get_free_slot(self, vehicle_type: VehicleType) -> Optional[ParkingSlot]:
        """The exit never hands out slots."""
        return None

    def create_ticket(self, slot: Optional[ParkingSlot], vehicle: Vehicle) -> Optional[Ticket]:
        """Close the ticket by releasing ``slot``; no new ticket is issued."""
        if slot is None:
            print("Invalid parking slot.")
            return None
        slot.release()
        print(f"Ticket closed for slot {slot.slot_id}")
        return None

    def ticket_details(self, ticket_id: str) -> Optional[Ticket]:
        """Return the ticket, marked paid."""
        ticket = self._find_ticket(ticket_id)
        if ticket is not None:
            ticket.set_status("P")
        return ticket