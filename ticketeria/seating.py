"""Seats, venue sections and venues."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TextIO


@dataclass
class Seat:
    """A numbered seat that is either available or reserved."""

    number: int = 0
    available: bool = True

    def reserve(self) -> None:
        self.available = False

    def release(self) -> None:
        self.available = True


class Section:
    """A named block of seats numbered from 1."""

    def __init__(self, name: str = "", seat_count: int = 0) -> None:
        self.name = name
        self.seats: list[Seat] = [Seat(number) for number in range(1, seat_count + 1)]

    @property
    def seat_count(self) -> int:
        return len(self.seats)

    def render_seats(self) -> str:
        return "\n".join(
            f"Asiento [{seat.number}] {'Disponible' if seat.available else 'Ocupado'}"
            for seat in self.seats
        )

    def render_available(self) -> str:
        lines = [
            f"Asiento [{seat.number}] Disponible" for seat in self.seats if seat.available
        ]
        if not lines:
            return "No hay asientos disponibles en esta seccion."
        return "\n".join(lines)

    def find_seat(self, number: int) -> Optional[Seat]:
        return next((seat for seat in self.seats if seat.number == number), None)

    def save(self, stream: TextIO) -> None:
        """Write the section as a header line followed by one line per seat."""
        stream.write(f"{self.name} {self.seat_count}\n")
        for seat in self.seats:
            stream.write(f"{seat.number} {int(seat.available)}\n")

    def load(self, stream: TextIO) -> None:
        """Replace this section with one read from ``stream``."""
        header = stream.readline().rsplit(maxsplit=1)
        if len(header) != 2:
            raise ValueError("malformed section header")
        name, count_text = header
        count = int(count_text)
        if count < 0:
            raise ValueError("negative seat count")
        seats = []
        for _ in range(count):
            fields = stream.readline().split()
            if len(fields) != 2:
                raise ValueError("malformed seat line")
            number, available = (int(field) for field in fields)
            seat = Seat(number)
            if not available:
                seat.reserve()
            seats.append(seat)
        self.name = name
        self.seats = seats

    def __len__(self) -> int:
        return len(self.seats)


class Venue:
    """A named venue with a general section."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.section = Section("General")

    def render(self) -> str:
        parts = [f"Lugar: {self.name}"]
        seats = self.section.render_seats()
        if seats:
            parts.append(seats)
        return "\n".join(parts)