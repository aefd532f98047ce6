"""Factory method: dialogs that create buttons, creators that create products."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class Button(ABC):
    """A product whose construction is announced on standard output."""

    label = "Button"

    def __init__(self) -> None:
        print(f"I am a {self.label}")

    @abstractmethod
    def render(self) -> str:
        """Return the render message."""

    @abstractmethod
    def click(self) -> str:
        """Return the click message."""


class WindowsButton(Button):
    label = "WindowsButton"

    def render(self) -> str:
        return " I am a windows Button Render"

    def click(self) -> str:
        return " I am a windows Button Click"


class RadioButton(Button):
    label = "RadioButton"

    def render(self) -> str:
        return " I am a RadioButton  Render"

    def click(self) -> str:
        return " I am a RadioButton  Click"


class HtmlButton(Button):
    label = "HTMLButton"

    def render(self) -> str:
        return " I am a HTML Button Render"

    def click(self) -> str:
        return " I am a HTML Button Click"


class Dialog(ABC):
    """Creator whose subclasses decide which button to build."""

    button_class: type = Button

    def create_button(self) -> Button:
        """Build a button, click and render it, and return it."""
        button = self.button_class()
        print(button.click())
        print(button.render())
        return button

    def some_operation(self) -> str:
        self.create_button()
        return "Creator: The same creator's code has just worked with"


class WindowsDialog(Dialog):
    button_class = WindowsButton


class HtmlDialog(Dialog):
    button_class = HtmlButton


class RadioDialog(Dialog):
    button_class = RadioButton


class Product:
    """Base product; concrete products announce themselves when built."""

    def __init__(self) -> None:
        print(f"I am {type(self).__name__}")


class ConcreteProduct1(Product):
    pass


class ConcreteProduct2(Product):
    pass


class Creator(ABC):
    @abstractmethod
    def factory_method(self) -> Product:
        """Build a product."""


class ConcreteCreator1(Creator):
    def factory_method(self) -> Product:
        return ConcreteProduct1()


class ConcreteCreator2(Creator):
    def factory_method(self) -> Product:
        return ConcreteProduct2()


def main(argv: Optional[list] = None) -> int:
    print("factory")
    WindowsDialog().some_operation()
    ConcreteCreator1().factory_method()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())