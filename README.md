# designlab

Small, self-contained examples of classic object-oriented design patterns and
of low-level system designs. Every module can be imported and used from your
own code, and each comes with a short demo command.

No third-party libraries are needed at run time.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Design patterns (`designlab.patterns`)

| Module | What it contains |
| --- | --- |
| `logger` | `LogLevel` (ERROR … DEBUG4), `format_record(level, message)` and `Logger`, which writes a record only when its level is at or below the threshold (default `DEBUG2`, to standard error unless a stream is given). `Logger.log` returns the written line, or `None` when filtered out. |
| `adapter` | The `Language` interface, `English`, an incompatible `German` class, and `LanguageAdapter`, which presents a `German` object as a `Language`. `convert_logs(language)` runs both operations and returns what was logged. |
| `abstract_factory` | `VehicleCompany` with `make_car()` / `make_truck()`; `Tata` and `Mahindra` build their own `Car` and `Truck` families, each with `describe()`. |
| `factory_method` | `Dialog` subclasses (`WindowsDialog`, `HtmlDialog`, `RadioDialog`) create buttons via `create_button()`; `Creator` subclasses create `ConcreteProduct1` / `ConcreteProduct2` via `factory_method()`. |
| `observer` | A `Publisher` notifying `PrimeCustomer`s when `important_update` is set, and a `Stock` notifying attached `Investor`s on every `set_price()`. `Publisher.remove_customer` raises `ValueError` for an unknown customer. |
| `chain` | `build_chain()` returns handlers for requests up to 10, 11–20 and 21–30; `handle_request` returns the message of the handler that took it and raises `UnhandledRequestError` when none does. |
| `composite` | `Item` and `OrderBox` share the `Component` interface; `details()` returns lines, `print_details()` prints them. |

Example:

```python
from designlab.patterns.observer import Investor, Stock

stock = Stock("IBM", 120)
stock.attach(Investor("Ajay"))
lines = stock.set_price(125.5)
# ['Ajay received update. New price: 125.5']
```

## System designs

- `designlab.atm` — `Account` (`SavingAccount`, `CheckingAccount`) with
  `update_balance`, which raises `InsufficientBalanceError` on an overdrawn
  withdrawal; `Transaction` kinds with printed receipts; a `User` with a
  five-row mini statement; and `ATM`, which validates cards, runs one menu
  choice per `start_transaction` call (input is read through an `ask`
  callable, `input` by default) and raises `AccountNotFoundError` for an
  unknown card.
- `designlab.parking` — `ParkingSlot`s per `VehicleType`, `Vehicle`s,
  `Payment` channels chosen by `payment_for(mode)`, `Ticket`s with exit time,
  duration and cost estimate (20 for two-wheelers, 40 for four-wheelers,
  `ValueError` for trucks), a `GroundFloor` lot with `ParkingAdmin` and
  `ParkingDisplayDashboard`, and `EntryManager` / `ExitManager` attendants.
  `parking_app.run_demo()` walks through one visit and returns the floor and
  the exit ticket.
- `designlab.elevator` — an `ElevatorCar` with `State` and `Direction`, a
  `Controller`, and internal and external dispatchers.
- `designlab.tictactoe` — an N×N `Board` (`add_piece` raises `IndexError` off
  the board) and a `Game` between `Player1` (X) and `Player2` (O) that reads
  moves through an `ask` callable.
- `designlab.bookmyshow` — `Movie`, `Screen`, `Customer`, `MovieTicket` and a
  `BookingManager` that records bookings and prints the show schedule.

## Demo commands

Each of these runs a short scripted scenario and prints what happens:

```
designlab-logger
designlab-adapter
designlab-abstract-factory
designlab-factory
designlab-observer
designlab-chain
designlab-composite
designlab-elevator
designlab-parking
designlab-bookmyshow
```

Two commands are interactive and read from standard input:

```
designlab-atm        # pick 1-5 from the menu, then an amount; answer N to stop
designlab-tictactoe  # enter the board size, then "row col" for each move
```

## What this package does not do

Everything is kept in memory for the life of one process: accounts, tickets,
bookings and slot states are not saved anywhere. The ATM demo always uses the
built-in card 12345 and its sample accounts. Parking tickets all carry the id
`TKT1`, and the booking manager does not check seat availability or screen
capacity. There is no graphical or network interface.