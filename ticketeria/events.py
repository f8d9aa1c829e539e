"""Events on sale and their specialised kinds."""

from __future__ import annotations

import itertools

from .seating import Section


class Event:
    """An event at a venue with three seating sections."""

    _ids = itertools.count(1)

    def __init__(
        self,
        name: str = "",
        date: str = "",
        venue: str = "",
        price: float = 0.0,
        main_seats: int = 10,
        general_seats: int = 10,
        vip_seats: int = 5,
    ) -> None:
        self.id = next(Event._ids)
        self.name = name
        self.date = date
        self.venue = venue
        self.price = price
        self.main_section = Section("Principal", main_seats)
        self.general_section = Section("General", general_seats)
        self.vip_section = Section("VIP Gold", vip_seats)

    @property
    def sections(self) -> tuple[Section, Section, Section]:
        return (self.main_section, self.general_section, self.vip_section)

    def describe(self) -> str:
        return "\n".join(
            [
                f"ID: {self.id}",
                f"Nombre: {self.name}",
                f"Fecha:  {self.date}",
                f"Lugar:  {self.venue}",
                f"Precio base: S/ {self.price:g}",
            ]
        )

    def _card(self, *lines: str) -> str:
        body = [*lines, f"Fecha: {self.date}", f"Lugar: {self.venue}", f"Precio: S/.{self.price:g}"]
        return "\n".join(f"   |   {line}" for line in body)


class Concert(Event):
    def __init__(
        self,
        name: str,
        date: str,
        venue: str,
        price: float,
        artist: str,
        main_seats: int = 10,
        general_seats: int = 10,
        vip_seats: int = 5,
    ) -> None:
        super().__init__(name, date, venue, price, main_seats, general_seats, vip_seats)
        self.artist = artist

    def describe(self) -> str:
        return self._card(f"CONCIERTO: {self.name}", f"Artista: {self.artist}")


class SportsMatch(Event):
    def __init__(
        self,
        name: str,
        date: str,
        venue: str,
        price: float,
        home: str,
        away: str,
        main_seats: int = 10,
        general_seats: int = 10,
        vip_seats: int = 5,
    ) -> None:
        super().__init__(name, date, venue, price, main_seats, general_seats, vip_seats)
        self.home = home
        self.away = away

    def describe(self) -> str:
        return self._card(
            f"Partido Deportivo: {self.home} vs {self.away}", f"Evento: {self.name}"
        )


class Festival(Event):
    def __init__(
        self,
        name: str,
        date: str,
        venue: str,
        price: float,
        days: int,
        category: str,
        main_seats: int = 10,
        general_seats: int = 10,
        vip_seats: int = 5,
    ) -> None:
        super().__init__(name, date, venue, price, main_seats, general_seats, vip_seats)
        self.days = days
        self.category = category

    def describe(self) -> str:
        return self._card(
            f"Festival: {self.name}",
            f"Categoria: {self.category}",
            f"Duracion: {self.days} dias",
        )


class Play(Event):
    def __init__(
        self,
        name: str,
        date: str,
        venue: str,
        price: float,
        director: str,
        duration: int,
        main_seats: int = 10,
        general_seats: int = 10,
        vip_seats: int = 5,
    ) -> None:
        super().__init__(name, date, venue, price, main_seats, general_seats, vip_seats)
        self.director = director
        self.duration = duration

    def describe(self) -> str:
        return self._card(
            f"Obra Teatral: {self.name}",
            f"Director: {self.director}",
            f"Duracion: {self.duration} min",
        )