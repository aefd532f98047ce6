"""Observer pattern: a publisher notifying customers, a stock notifying investors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

SALE_MESSAGE = "Amazon sell is on the new year.\n"


class Customer(ABC):
    """Subscriber to publisher announcements."""

    @abstractmethod
    def update(self, message: str) -> str:
        """Receive ``message`` and return what was shown."""


class PrimeCustomer(Customer):
    """A named customer who prints every announcement received."""

    def __init__(self, name: str) -> None:
        self.name = name

    def update(self, message: str) -> str:
        line = f"{self.name} msg :{message}"
        print(line, end="")
        return line


class Publisher:
    """Keeps a list of customers and notifies them of important updates."""

    def __init__(self, important_update: bool = False) -> None:
        self.important_update = important_update
        self.customers: List[Customer] = []

    def add_customer(self, customer: Customer) -> None:
        self.customers.append(customer)

    def remove_customer(self, customer: Customer) -> None:
        """Unsubscribe ``customer``; raises ValueError if it is not subscribed."""
        for index, existing in enumerate(self.customers):
            if existing is customer:
                del self.customers[index]
                return
        raise ValueError(f"customer {customer!r} is not subscribed")

    def notify_customers(self) -> List[str]:
        return [customer.update(SALE_MESSAGE) for customer in self.customers]

    def business_logic(self) -> List[str]:
        """Notify customers only when there is an important update."""
        if self.important_update:
            return self.notify_customers()
        return []


class Investor:
    """Receives stock price changes."""

    def __init__(self, name: str) -> None:
        self.name = name

    def update(self, price: float) -> str:
        line = f"{self.name} received update. New price: {price:g}"
        print(line)
        return line


class Stock:
    """A priced stock that tells its investors about every new price."""

    def __init__(self, name: str, price: float) -> None:
        self.name = name
        self.price = price
        self.investors: List[Investor] = []

    def attach(self, investor: Investor) -> None:
        self.investors.append(investor)

    def detach(self, investor: Investor) -> None:
        """Remove every attachment of ``investor``."""
        self.investors = [inv for inv in self.investors if inv is not investor]

    def notify_investors(self, price: float) -> List[str]:
        lines = [investor.update(price) for investor in self.investors]
        print()
        return lines

    def set_price(self, price: float) -> List[str]:
        self.price = price
        return self.notify_investors(price)


def main(argv: Optional[list] = None) -> int:
    print("Observer Pattern")
    publisher = Publisher(important_update=True)
    publisher.add_customer(PrimeCustomer("Ajay"))
    publisher.add_customer(PrimeCustomer("Vijay"))
    publisher.business_logic()

    ibm = Stock("IBM", 120)
    first, second, third = Investor("Ajay"), Investor("Gopal"), Investor("Vinita")
    for investor in (first, second, third):
        ibm.attach(investor)
    for price in (120.50, 112.50, 125.50):
        ibm.set_price(price)
    ibm.detach(third)
    ibm.set_price(125.50)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())