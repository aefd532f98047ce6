"""Composite pattern: single items and boxes of items share one interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional


class Component(ABC):
    """Anything with a name and a price that can describe itself."""

    name: str
    price: int

    @abstractmethod
    def details(self) -> List[str]:
        """Return the detail lines."""

    def print_details(self) -> None:
        for line in self.details():
            print(line)


class Item(Component):
    def __init__(self, name: str, price: int) -> None:
        self.name = name
        self.price = price

    def details(self) -> List[str]:
        return [f"Item Name: {self.name} Price: {self.price}"]


class OrderBox(Component):
    """A named, priced box whose details list its direct contents."""

    def __init__(self, name: str, price: int, items: Iterable[Component]) -> None:
        self.name = name
        self.price = price
        self.items = list(items)

    def details(self) -> List[str]:
        return [f"Item Name: {item.name} Price: {item.price}" for item in self.items]


def main(argv: Optional[list] = None) -> int:
    items = [
        Item("HeadPhone", 2000),
        Item("ScreenGuard", 1000),
        Item("Nanpro", 700),
        Item("Phone", 78000),
    ]
    OrderBox("Standard Order", 100, items).print_details()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())