"""Movie ticket booking: movies, screens, customers and tickets."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional


class TicketType(IntEnum):
    PLATINUM = 0
    GOLD = 1
    SILVER = 2
    BALCONY = 3


@dataclass
class Customer:
    name: str = ""


@dataclass
class Movie:
    name: str
    language: str


@dataclass
class Screen:
    screen_id: int = 0
    movies: List[Movie] = field(default_factory=list)
    time_slots: List[str] = field(default_factory=list)
    seats: int = 0


@dataclass
class MovieTicket:
    """A ticket that is filled in when it is booked."""

    ticket_id: str = ""
    screen_no: int = 0
    time_slot: str = ""
    amount: int = 0
    movie_name: str = ""
    seat_no: str = ""
    ticket_type: Optional[TicketType] = None
    customer: Customer = field(default_factory=Customer)

    def book(
        self,
        ticket_id: str,
        screen_no: int,
        time_slot: str,
        amount: int,
        movie_name: str,
        seat_no: str,
        ticket_type: TicketType,
        customer: Customer,
    ) -> bool:
        self.ticket_id = ticket_id
        self.screen_no = screen_no
        self.time_slot = time_slot
        self.amount = amount
        self.movie_name = movie_name
        self.seat_no = seat_no
        self.ticket_type = ticket_type
        self.customer = customer
        return True


_SCHEDULE = (
    "---------------- Book My Show ----------------",
    "Movie: Sairat: Dhoom",
    "Cinema Hall: Abhiruchi Multiplex",
    "Show Timings: ",
    "   - Day 1: Sairat 10:00 AM, Dhoom 2:00 PM, Kytes 6:00 PM",
    "   - Day 2: Dhoom 11:00 AM, Sairat 3:00 PM, IndianJones 7:00 PM",
    "   - Day 3: Dhoom 9:00 AM, IndianJones 1:00 PM, IndianJones 5:00 PM",
    "   - Day 4: Dhoom 12:00 PM, IndianJones 4:00 PM, Sairat 8:00 PM",
    "---------------------------------------------",
)


class BookingManager:
    """Keeps the movies, screens and booked tickets."""

    def __init__(self) -> None:
        self.tickets: List[MovieTicket] = []
        self.movies: List[Movie] = []
        self.screens: List[Screen] = []

    def generate_booking(self, ticket: MovieTicket) -> bool:
        self.tickets.append(ticket)
        return True

    def generate_movie_list(self) -> None:
        self.movies.extend([
            Movie("Dhoom3", "Hindi"),
            Movie("Kytes", "Hindi"),
            Movie("Sairat", "Marathi"),
            Movie("IndianJones", "HindiDubbed"),
        ])

    def generate_screen_list(self) -> None:
        """Set up the first screen with every known movie and its time slots."""
        if not self.screens:
            self.screens.append(Screen())
        screen = self.screens[0]
        screen.screen_id = 1
        screen.movies = list(self.movies)
        screen.seats = 100
        screen.time_slots = ["9-12", "1-4", "5-8", "9-12"]

    def schedule_text(self) -> str:
        """Return the show schedule."""
        return "\n".join(_SCHEDULE) + "\n"


def main(argv: Optional[list] = None) -> int:
    manager = BookingManager()
    print(manager.schedule_text(), end="")
    ticket = MovieTicket()
    ticket.book("tkt1", 1, "11", 150, "DHOOM", "B-12", TicketType.PLATINUM, Customer("Ajay"))
    booked = manager.generate_booking(ticket)
    print(f"IS Ticket booked :{int(booked)}", end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())