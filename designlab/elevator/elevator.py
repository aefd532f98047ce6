"""A single-car elevator driven by a controller and two dispatchers."""

from __future__ import annotations

from enum import IntEnum
from typing import List, Optional


class State(IntEnum):
    IDLE = 0
    RUNNING = 1
    OPENED = 2
    CLOSED = 3


class Direction(IntEnum):
    UP = 0
    DOWN = 1


class ExternalDispatcher:
    """Button outside the lift, on a floor."""

    def __init__(self) -> None:
        self.floor: Optional[int] = None

    def press_button(self, floor: int) -> str:
        self.floor = floor
        message = f"External user requested the lift from the floor no: {floor}"
        print(message)
        return message


class InternalDispatcher:
    """Buttons inside the car."""

    def press_button(self, floor: int) -> str:
        message = f"User is in the lift and press floor no: {floor}"
        print(message)
        return message


class ElevatorCar:
    def __init__(self) -> None:
        self.current_floor = 5
        self.state = State.IDLE
        self.direction = Direction.UP
        self.internal_dispatcher = InternalDispatcher()

    def position_report(self) -> str:
        return (
            f"Elevator is currently at {self.current_floor} with direction (U, D)"
            f"{int(self.direction)} with lift state (I,R,O,C)  {int(self.state)}"
        )

    def set_current_state(self, floor: int, direction: Direction, state: State) -> None:
        self.current_floor = floor
        self.state = state
        self.direction = direction
        print(self.position_report())

    def press_internal_button(self, floor: int) -> None:
        self.internal_dispatcher.press_button(floor)
        self.set_current_state(floor, Direction.UP, State.CLOSED)
        self.run_to(floor)

    def run_to(self, floor: int) -> None:
        """Start running towards ``floor``: up if it is above, otherwise down."""
        print("In running state RUNNING")
        self.direction = Direction.UP if self.current_floor < floor else Direction.DOWN
        self.state = State.RUNNING


class Controller:
    def __init__(self) -> None:
        self.car = ElevatorCar()
        self.external_dispatcher = ExternalDispatcher()
        self.requested: List[int] = []
        self.start_lift(5)

    def start_lift(self, floor: int) -> None:
        self.car.state = State.CLOSED
        print("Lift started, State CLOSED")
        self.car.run_to(floor)

    def request_from_external_user(self, floor: int) -> None:
        self.requested.append(floor)
        self.external_dispatcher.press_button(floor)
        self.car.state = State.OPENED
        self.car.direction = Direction.UP
        print(self.car.position_report())
        self.start_lift(floor)


def main(argv: Optional[list] = None) -> int:
    controller = Controller()
    print(controller.car.position_report())

    external = ExternalDispatcher()
    external.press_button(0)
    controller.car.press_internal_button(4)

    external.press_button(2)
    controller.car.press_internal_button(0)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())