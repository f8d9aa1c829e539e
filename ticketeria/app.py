"""Interactive menus of the ticketing system."""

from __future__ import annotations

import argparse
import time
from collections.abc import Callable, Sequence
from typing import Optional

from . import console
from .events import Concert, Event, Festival, Play, SportsMatch
from .manager import EventManager
from .seating import Venue

InputFunc = Callable[[str], str]

STATUS_DELAY = 1.5


def _parse_int(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except ValueError:
        return None


class EventsMenu:
    """Menu for browsing events, searching them and inspecting seats."""

    def __init__(self, input_func: InputFunc = input) -> None:
        self._input = input_func
        self.venue = Venue("Estadio Nacional")
        self.manager = EventManager()

    def load_sample_events(self) -> None:
        for event in (
            Concert("RockFest", "2025-06-10", "Estadio San Marcos", 150, "Los Riffs"),
            Concert("MetalVibe", "2025-07-01", "Estadio San Marcos", 200, "Iron Scream"),
            Play("Hamlet", "2025-08-15", "Teatro municpal", 90, "Juan Perez", 120),
            Festival("Book Fest", "2025-06-07", "Estadio Nacional", 50, 2, "Libros"),
            SportsMatch(
                "El Clasico", "2025-08-12", "Estadio Nacional", 70,
                "Universitario", "Alianza Lima",
            ),
        ):
            self.manager.add_event(event)

    def _say(self, x: int, y: int, text: str) -> None:
        console.goto_xy(x, y)
        print(text, end="", flush=True)

    def _pause(self) -> None:
        width, _ = console.console_size()
        self._say(max(0, (width - 40) // 2), 22, "Presione cualquier tecla para continuar...")
        self._input("")
        console.clear_screen()

    def _choose_event(self) -> Optional[Event]:
        console.clear_screen()
        self._say(45, 28, "EVENTOS DISPONIBLES")
        for number, event in enumerate(self.manager.events, 1):
            self._say(45, 29 + number, f"{number}. ")
            print(event.describe(), flush=True)
        self._say(45, 40, "Seleccione un evento: ")
        selection = _parse_int(self._input(""))
        if selection is None or not 1 <= selection <= len(self.manager.events):
            self._say(45, 42, "Opcion invalida.")
            self._pause()
            return None
        return self.manager.events.get(selection - 1)

    def _ask_section(self, event: Event) -> Optional[int]:
        console.clear_screen()
        self._say(45, 30, f"ASIENTOS PARA: {event.name}")
        self._say(45, 32, "1. Principal")
        self._say(45, 33, "2. VIP")
        self._say(45, 34, "3. GOLD")
        self._say(45, 35, "Seleccione una opcion: ")
        return _parse_int(self._input(""))

    def _show_seats(self) -> None:
        event = self._choose_event()
        if event is None:
            return
        choice = self._ask_section(event)
        if choice in (1, 2, 3):
            print(event.sections[choice - 1].render_seats(), flush=True)
        else:
            self._say(45, 30, "Opcion invalida.")
        self._pause()

    def _show_seats_reversed(self) -> None:
        event = self._choose_event()
        if event is None:
            return
        self._ask_section(event)
        self._pause()

    def _search_by_month(self) -> None:
        console.clear_screen()
        self._say(45, 30, "Ingrese mes (ej: 06): ")
        month = self._input("").strip()
        event = self.manager.find_by_month(month)
        console.clear_screen()
        if event is not None:
            self._say(45, 30, "Evento encontrado:")
            self._say(45, 31, "")
            print(event.describe(), flush=True)
            self.manager.push_history(event)
        else:
            self._say(45, 30, "No se encontro evento para ese mes.")
        self._pause()

    def _show_history(self) -> None:
        console.clear_screen()
        event = self.manager.pop_history()
        if event is not None:
            print("Evento retirado del historial: ", end="")
            print(event.describe(), flush=True)
        else:
            print("Historial vacio.", flush=True)
        self._pause()

    def run(self) -> None:
        self.load_sample_events()
        options = [
            "1. Ver todos los eventos",
            "2. Buscar por mes (MM)",
            "3. Mostrar historial",
            "4. Ver eventos y asientos del lugar",
            "5. Ver asientos en orden inverso",
            "0. Volver al menu principal",
            "Opcion: ",
        ]
        while True:
            console.clear_screen()
            console.show_module_title("MODULO EVENTOS")
            for row, text in enumerate(options, 50):
                self._say(45, row, text)
            console.goto_xy(53, 50 + len(options) - 1)
            option = _parse_int(self._input(""))
            if option == 1:
                console.clear_screen()
                print(self.manager.describe_events(), flush=True)
                self._pause()
            elif option == 2:
                self._search_by_month()
            elif option == 3:
                self._show_history()
            elif option == 4:
                self._show_seats()
            elif option == 5:
                self._show_seats_reversed()
            elif option == 0:
                self._say(45, 30, "Saliendo del modulo eventos...")
                return
            else:
                self._say(45, 30, "Opcion invalida.")
                self._pause()


class MainMenu:
    """Top-level menu dispatching to the system's modules."""

    def __init__(self, input_func: InputFunc = input) -> None:
        self._input = input_func
        self.events_menu = EventsMenu(input_func)

    def _message(self, text: str) -> None:
        console.show_status(text)
        time.sleep(STATUS_DELAY)

    def run(self) -> None:
        while True:
            console.draw_logo_border()
            console.show_main_menu()
            option = _parse_int(self._input(""))
            if option == 1:
                console.clear_screen()
                self.events_menu.run()
            elif option in (2, 3):
                self._message("Modulo no disponible.")
            elif option == 0:
                self._message("Gracias por usar Ticketek. ¡Hasta pronto!")
                return
            else:
                self._message("Opcion invalida. Intente nuevamente.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="ticketeria", description="Sistema Ticketec")
    parser.parse_args(argv)
    try:
        MainMenu().run()
    except (EOFError, KeyboardInterrupt):
        print()
    return 0