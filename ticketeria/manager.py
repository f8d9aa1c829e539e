"""Keeps the catalogue of events and a browsing history."""

from __future__ import annotations

from os import PathLike
from typing import Optional, Union

from .events import Event
from .structures import LinkedList, Stack


class EventManager:
    """Holds events ordered by date and a stack of recently viewed events."""

    def __init__(self) -> None:
        self.events: LinkedList[Event] = LinkedList()
        self.history: Stack[Event] = Stack()

    def add_event(self, event: Event) -> None:
        """Insert ``event`` keeping the catalogue sorted by date."""
        self.events.insert_sorted(event, lambda new, current: new.date < current.date)

    def describe_events(self) -> str:
        return "\n\n".join(event.describe() for event in self.events)

    def find_by_month(self, month: str) -> Optional[Event]:
        """Return the earliest event whose date (YYYY-MM-DD) falls in ``month``."""
        return self.events.find(lambda event: event.date[5:7] == month)

    def find_by_id(self, event_id: int) -> Optional[Event]:
        return self.events.find(lambda event: event.id == event_id)

    def push_history(self, event: Event) -> None:
        self.history.push(event)

    def pop_history(self) -> Optional[Event]:
        """Remove and return the most recent history entry, or None if there is none."""
        if self.history.is_empty():
            return None
        return self.history.pop()

    def has_history(self) -> bool:
        return not self.history.is_empty()

    def save_seats(self, path: Union[str, PathLike]) -> None:
        """Write the seat state of every section of every event to ``path``."""
        with open(path, "w", encoding="utf-8") as out:
            for event in self.events:
                for section in event.sections:
                    section.save(out)