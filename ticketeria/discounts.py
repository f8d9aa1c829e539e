"""Discounts and promotions."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass
class Discount:
    """A promotional discount expressed as a percentage."""

    code: int = 0
    description: str = ""
    percentage: float = 0.0
    active: bool = False

    def describe(self) -> str:
        status = " (Activo)" if self.active else " (Inactivo)"
        return (
            f"Codigo: {self.code} | {self.description} | "
            f"{self.percentage:g}% de descuento{status}"
        )

    def __lt__(self, other: Discount) -> bool:
        if not isinstance(other, Discount):
            return NotImplemented
        return self.percentage < other.percentage

    def __gt__(self, other: Discount) -> bool:
        if not isinstance(other, Discount):
            return NotImplemented
        return self.percentage > other.percentage

    @staticmethod
    def filter_describe(
        discounts: Iterable[Discount], criterion: Callable[[Discount], bool]
    ) -> str:
        """Describe every discount that satisfies ``criterion``, one per line."""
        return "\n".join(d.describe() for d in discounts if criterion(d))

    @staticmethod
    def find(
        discounts: Iterable[Discount], criterion: Callable[[Discount], bool]
    ) -> Optional[Discount]:
        return next((d for d in discounts if criterion(d)), None)

    @staticmethod
    def apply_change(
        discounts: Iterable[Discount],
        criterion: Callable[[Discount], bool],
        transform: Callable[[Discount], object],
    ) -> None:
        for discount in discounts:
            if criterion(discount):
                transform(discount)