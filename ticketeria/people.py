"""People known to the ticketing system: persons, administrators and clients."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

PASSWORD = "password"

_EMAIL_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789.@_-"
)


def _take(rest: str) -> tuple[Optional[str], str]:
    """Split off the next comma-terminated field, or return None if there is none."""
    head, sep, tail = rest.partition(",")
    if not sep:
        return None, rest
    return head, tail


def _head(rest: str) -> str:
    """Return the text before the first comma, or all of it if there is none."""
    return rest.partition(",")[0]


def _today() -> str:
    return date.today().isoformat()


@dataclass(eq=False)
class Person:
    """Basic contact data shared by every kind of user."""

    id: int = 0
    name: str = ""
    surname: str = ""
    email: str = ""
    phone: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.surname}"

    def update(self, name: str, surname: str, email: str, phone: str) -> None:
        self.name = name
        self.surname = surname
        self.email = email
        self.phone = phone

    @staticmethod
    def validate_email(email: str) -> bool:
        """Accept only safe characters, an '@' and a '.' somewhere after it."""
        if not all(char in _EMAIL_CHARS for char in email):
            return False
        at = email.find("@")
        return at != -1 and email.find(".", at) != -1

    def to_record(self) -> str:
        return f"{self.id},{self.name},{self.surname},{self.email},{self.phone},"

    @staticmethod
    def _split_person(line: str) -> tuple[tuple[int, str, str, str, str], str]:
        rest = line.rstrip("\r\n")
        values = []
        for _ in range(5):
            token, rest = _take(rest)
            if token is None:
                raise ValueError("malformed person record")
            values.append(token)
        ident, name, surname, email, phone = values
        return (int(ident), name, surname, email, phone), rest

    @classmethod
    def from_record(cls, line: str) -> Person:
        values, _ = cls._split_person(line)
        return cls(*values)

    def describe(self) -> str:
        return "\n".join(
            [
                f"ID: {self.id}",
                f"Nombre completo: {self.full_name}",
                f"Email: {self.email}",
                f"Telefono: {self.phone}",
            ]
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self.id == other.id

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"{self.id} - {self.full_name}"


@dataclass(eq=False)
class Administrator(Person):
    """A person with access to administrative services."""

    password: str = PASSWORD

    def validate_access(self, password: str) -> bool:
        return password == self.password

    def attempt_access(self, password: str, callback: Callable[[bool], object]) -> bool:
        result = self.validate_access(password)
        callback(result)
        return result

    def change_password(
        self, current: str, new: str, validator: Callable[[str], bool]
    ) -> bool:
        """Set ``new`` if ``current`` matches and ``validator`` accepts ``new``."""
        if self.validate_access(current) and validator(new):
            self.password = new
            return True
        return False

    @staticmethod
    def filter_administrators(
        admins: Iterable[Administrator],
        criterion: Callable[[Administrator], bool],
        action: Callable[[Administrator], object],
    ) -> None:
        for admin in admins:
            if criterion(admin):
                action(admin)

    def to_record(self) -> str:
        return f"{super().to_record()}{self.password},"

    @classmethod
    def from_record(cls, line: str) -> Administrator:
        values, rest = cls._split_person(line)
        admin = cls(*values)
        admin.password = _head(rest)
        return admin

    def describe(self) -> str:
        return f"{super().describe()}\nNivel de acceso: Administrador"


@dataclass(eq=False)
class Client(Person):
    """A customer with an address, loyalty points and a purchase history."""

    address: str = ""
    registration_date: str = field(default_factory=_today)
    loyalty_points: int = 0
    purchase_history: list[int] = field(default_factory=list)

    def add_points(self, points: int) -> None:
        self.loyalty_points += points

    def redeem_points(self, points: int) -> bool:
        if self.loyalty_points >= points:
            self.loyalty_points -= points
            return True
        return False

    def add_purchase(self, purchase_id: int) -> None:
        self.purchase_history.append(purchase_id)

    def to_record(self) -> str:
        parts = [
            str(self.id),
            self.name,
            self.surname,
            self.email,
            self.phone,
            self.address,
            self.registration_date,
            str(self.loyalty_points),
            str(len(self.purchase_history)),
        ]
        parts.extend(str(purchase) for purchase in self.purchase_history)
        return ",".join(parts)

    @classmethod
    def from_record(cls, line: str) -> Client:
        """Parse a record; fields missing from a short line keep their defaults."""
        client = cls()
        rest = line.rstrip("\r\n")

        token, rest = _take(rest)
        if token is not None:
            client.id = int(token)
        for attribute in ("name", "surname", "email", "phone", "address", "registration_date"):
            token, rest = _take(rest)
            if token is not None:
                setattr(client, attribute, token)
        token, rest = _take(rest)
        if token is not None:
            client.loyalty_points = int(token)
        count = 0
        token, rest = _take(rest)
        if token is not None:
            count = int(token)
        for _ in range(count):
            token, rest = _take(rest)
            if token is not None:
                client.purchase_history.append(int(token))
            elif rest:
                client.purchase_history.append(int(rest))
                break
        return client

    def details(self) -> str:
        return "\n".join(
            [
                "Detalles de Cliente:",
                f"ID: {self.id}",
                f"Nombre completo: {self.full_name}",
                f"Email: {self.email} | Telefono: {self.phone}",
                f"Direccion: {self.address}",
                f"Fecha de registro: {self.registration_date}",
                f"Puntos de lealtad: {self.loyalty_points}",
            ]
        )

    def __str__(self) -> str:
        return f"Cliente [{self.id}]: {self.full_name} | Puntos: {self.loyalty_points}"