"""Abstract factory producing families of related vehicles."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class Car(ABC):
    @abstractmethod
    def describe(self) -> str:
        """Describe this car."""


class Truck(ABC):
    @abstractmethod
    def describe(self) -> str:
        """Describe this truck."""


class TataCar(Car):
    def describe(self) -> str:
        return "I am tata car Nexon!!!"


class TataTruck(Truck):
    def describe(self) -> str:
        return "I am tata truck Ace!!!"


class MahindraCar(Car):
    def describe(self) -> str:
        return "I am Mahindra car XUV 400!!!"


class MahindraTruck(Truck):
    def describe(self) -> str:
        return "I am Mahindra truck Blazo!!!"


class VehicleCompany(ABC):
    """Creates a car and a truck of one family."""

    @abstractmethod
    def make_car(self) -> Car:
        """Build this company's car."""

    @abstractmethod
    def make_truck(self) -> Truck:
        """Build this company's truck."""


class Tata(VehicleCompany):
    def make_car(self) -> Car:
        return TataCar()

    def make_truck(self) -> Truck:
        return TataTruck()


class Mahindra(VehicleCompany):
    def make_car(self) -> Car:
        return MahindraCar()

    def make_truck(self) -> Truck:
        return MahindraTruck()


def main(argv: Optional[list] = None) -> int:
    for company in (Tata(), Mahindra()):
        print(company.make_car().describe())
        print(company.make_truck().describe())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())