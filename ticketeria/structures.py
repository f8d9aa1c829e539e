"""Generic collections used throughout the ticketing system."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator
from functools import cmp_to_key
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

Formatter = Optional[Callable[[T], str]]


def _formatter(formatter: Formatter) -> Callable[[object], str]:
    return formatter if formatter is not None else str


class LinkedList(Generic[T]):
    """An ordered sequence with positional and predicate-based operations."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def _check_position(self, position: int) -> None:
        if not 0 <= position < len(self._items):
            raise IndexError(f"position {position} out of range")

    def insert_first(self, value: T) -> None:
        self._items.insert(0, value)

    def append(self, value: T) -> None:
        self._items.append(value)

    def insert_sorted(self, value: T, before: Callable[[T, T], bool]) -> None:
        """Insert ``value`` ahead of the first item it should precede."""
        for index, current in enumerate(self._items):
            if before(value, current):
                self._items.insert(index, value)
                return
        self._items.append(value)

    def insert(self, value: T, position: int) -> None:
        if not 0 <= position <= len(self._items):
            raise IndexError(f"position {position} out of range")
        self._items.insert(position, value)

    def get(self, position: int) -> T:
        self._check_position(position)
        return self._items[position]

    def set(self, position: int, value: T) -> None:
        self._check_position(position)
        self._items[position] = value

    def remove_at(self, position: int) -> None:
        self._check_position(position)
        del self._items[position]

    def remove_value(self, value: T) -> None:
        """Remove the first item equal to ``value``; do nothing if absent."""
        try:
            self._items.remove(value)
        except ValueError:
            pass

    def is_empty(self) -> bool:
        return not self._items

    def sort(self, should_swap: Callable[[T, T], bool]) -> None:
        """Stable sort where ``should_swap(a, b)`` means ``a`` belongs after ``b``."""

        def compare(a: T, b: T) -> int:
            if should_swap(a, b):
                return 1
            if should_swap(b, a):
                return -1
            return 0

        self._items.sort(key=cmp_to_key(compare))

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        return next((item for item in self._items if predicate(item)), None)

    def filter(self, predicate: Callable[[T], bool]) -> LinkedList[T]:
        return LinkedList(item for item in self._items if predicate(item))

    def for_each(self, action: Callable[[T], object]) -> None:
        for item in self._items:
            action(item)

    def render(self, formatter: Formatter = None) -> str:
        fmt = _formatter(formatter)
        return " -> " + " -> ".join(fmt(item) for item in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"LinkedList({self._items!r})"


class Queue(Generic[T]):
    """First-in, first-out queue."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: deque[T] = deque(items)

    def enqueue(self, value: T) -> None:
        self._items.append(value)

    def dequeue(self) -> T:
        if not self._items:
            raise IndexError("cola vacia")
        return self._items.popleft()

    def front(self) -> T:
        if not self._items:
            raise IndexError("cola vacia")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        return next((item for item in self._items if predicate(item)), None)

    def filter(self, predicate: Callable[[T], bool]) -> Queue[T]:
        return Queue(item for item in self._items if predicate(item))

    def for_each(self, action: Callable[[T], object]) -> None:
        for item in self._items:
            action(item)

    def render(self, formatter: Formatter = None) -> str:
        if not self._items:
            return "Cola vacia"
        fmt = _formatter(formatter)
        return "Cola (inicio -> fin): " + " -> ".join(fmt(item) for item in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"


class Stack(Generic[T]):
    """Last-in, first-out stack; iteration runs from top to base."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def push(self, value: T) -> None:
        self._items.append(value)

    def pop(self) -> T:
        if not self._items:
            raise IndexError("pila vacia")
        return self._items.pop()

    def peek(self) -> T:
        if not self._items:
            raise IndexError("pila vacia")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Return the topmost item that satisfies ``predicate``."""
        return next((item for item in self if predicate(item)), None)

    def filter(self, predicate: Callable[[T], bool]) -> Stack[T]:
        return Stack(item for item in self._items if predicate(item))

    def for_each(self, action: Callable[[T], object]) -> None:
        for item in self:
            action(item)

    def render(self, formatter: Formatter = None) -> str:
        if not self._items:
            return "Pila vacia"
        fmt = _formatter(formatter)
        lines = ["Pila (tope -> base): "]
        lines.extend(f"| {fmt(item)} |" for item in self)
        lines.append("---------")
        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"