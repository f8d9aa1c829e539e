"""Event tickets: issuing, validation and record serialisation."""

from __future__ import annotations

import secrets
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

CODE_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
CODE_LENGTH = 8


def generate_code() -> str:
    """Return a random eight-character ticket code of upper-case letters and digits."""
    return "".join(secrets.choice(CODE_ALPHABET) for _ in range(CODE_LENGTH))


def _today() -> str:
    return date.today().isoformat()


def _take(rest: str) -> tuple[Optional[str], str]:
    head, sep, tail = rest.partition(",")
    if not sep:
        return None, rest
    return head, tail


@dataclass(eq=False)
class Ticket:
    """A ticket for one seat at one event."""

    event_id: int = 0
    seat_id: int = 0
    price: float = 0.0
    used: bool = False
    code: str = field(default_factory=generate_code)
    issue_date: str = field(default_factory=_today)

    def validate(self) -> bool:
        """A ticket is valid while unused and bound to a real event and seat."""
        return not self.used and self.event_id > 0 and self.seat_id > 0

    def mark_used(self) -> None:
        self.used = True

    def printout(self) -> str:
        return "\n".join(
            [
                f"========= ENTRADA {self.code} =========",
                f"Evento ID: {self.event_id}",
                f"Asiento ID: {self.seat_id}",
                f"Precio: ${self.price:.2f}",
                f"Fecha de emision: {self.issue_date}",
                f"Estado: {'UTILIZADA' if self.used else 'NO UTILIZADA'}",
                "=====================================",
            ]
        )

    def to_record(self) -> str:
        return (
            f"{self.code},{self.event_id},{self.seat_id},"
            f"{self.price:g},{1 if self.used else 0},{self.issue_date}"
        )

    @classmethod
    def from_record(cls, line: str) -> Ticket:
        """Parse a record; fields missing from a short line keep their defaults."""
        ticket = cls()
        rest = line.rstrip("\r\n")

        token, rest = _take(rest)
        if token is not None:
            ticket.code = token
        token, rest = _take(rest)
        if token is not None:
            ticket.event_id = int(token)
        token, rest = _take(rest)
        if token is not None:
            ticket.seat_id = int(token)
        token, rest = _take(rest)
        if token is not None:
            ticket.price = float(token)
        token, rest = _take(rest)
        if token is not None:
            ticket.used = token == "1"
        ticket.issue_date = rest
        return ticket

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ticket):
            return NotImplemented
        return self.code == other.code

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        used = " (UTILIZADA)" if self.used else ""
        return (
            f"Entrada [{self.code}] - Evento: {self.event_id} | Asiento: {self.seat_id}"
            f" | Precio: ${self.price:.2f}{used}"
        )