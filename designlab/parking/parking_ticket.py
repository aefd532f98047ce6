"""Parking tickets: entry and exit times, cost and payment."""

from __future__ import annotations

import time
from enum import IntEnum
from typing import Callable, Optional

from designlab.parking.payment import Payment, PaymentMode, payment_for
from designlab.parking.slot import Vehicle, VehicleType

_EXIT_GRACE_SECONDS = 10 * 60
_TARIFF = {VehicleType.TWO_WHEELER: 20, VehicleType.FOUR_WHEELER: 40}


class TicketStatus(IntEnum):
    IDLE = 0
    ACTIVE = 1
    PAID = 2


class Ticket:
    """A ticket for one vehicle parked in one slot."""

    def __init__(
        self,
        slot_id: str,
        vehicle: Vehicle,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ticket_id = "TKT1"
        self.slot_id = slot_id
        self.vehicle = vehicle
        self._clock = clock
        self.entry_time = clock()
        self.exit_time: Optional[float] = None
        self.exit_time_seconds: Optional[float] = None
        self.cost: Optional[int] = None
        self.status = TicketStatus.IDLE
        self.payment: Optional[Payment] = None

    def set_exit_time(self) -> float:
        """Record the exit as now plus a ten-minute allowance; return it."""
        now = self._clock()
        self.exit_time_seconds = now
        self.exit_time = now + _EXIT_GRACE_SECONDS
        return self.exit_time

    def duration_minutes(self) -> int:
        """Whole minutes between entry and exit."""
        if self.exit_time is None:
            raise ValueError("exit time has not been set")
        return int((self.exit_time - self.entry_time) // 60)

    def estimate_cost(self) -> int:
        """Fee for the parked vehicle's type."""
        try:
            self.cost = _TARIFF[self.vehicle.vehicle_type]
        except KeyError:
            raise ValueError(
                f"no tariff for vehicle type {self.vehicle.vehicle_type.name}"
            ) from None
        return self.cost

    def do_payment(self, mode: PaymentMode, amount: int) -> str:
        """Pay ``amount`` through ``mode`` and return the confirmation."""
        self.payment = payment_for(mode)
        return self.payment.pay(amount)

    def set_status(self, choice: str) -> TicketStatus:
        """'A' marks the ticket active, 'P' paid; anything else leaves it alone."""
        if choice == "A":
            self.status = TicketStatus.ACTIVE
        elif choice == "P":
            self.status = TicketStatus.PAID
        return self.status