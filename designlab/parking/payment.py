"""Ways of paying the parking fee."""

from __future__ import annotations

from abc import ABC
from enum import IntEnum


class PaymentMode(IntEnum):
    CASH = 0
    ONLINEAPP = 1
    CARD = 2


class Payment(ABC):
    """Pays a fee through one channel."""

    channel = ""

    def pay(self, fee: int) -> str:
        """Pay ``fee``; print and return the confirmation."""
        message = f"Paying the fee via {self.channel}!{fee}"
        print(message)
        return message


class OnlineAppPayment(Payment):
    channel = "APP"


class CashPayment(Payment):
    channel = "cash"


class CardPayment(Payment):
    channel = "card"


_BY_MODE = {
    PaymentMode.CASH: CashPayment,
    PaymentMode.ONLINEAPP: OnlineAppPayment,
    PaymentMode.CARD: CardPayment,
}


def payment_for(mode: PaymentMode) -> Payment:
    """Return a payment for ``mode``; raises ValueError for unknown modes."""
    return _BY_MODE[PaymentMode(mode)]()