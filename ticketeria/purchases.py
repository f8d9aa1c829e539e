"""Purchases of tickets, with totals, discounts and an action log."""

from __future__ import annotations

import itertools
from datetime import date, datetime
from enum import Enum
from typing import Optional

from .structures import LinkedList, Queue, Stack
from .tickets import Ticket


class PurchaseStatus(Enum):
    PENDING = "PENDIENTE"
    CONFIRMED = "CONFIRMADA"
    CANCELLED = "CANCELADA"
    COMPLETED = "COMPLETADA"


class Purchase:
    """A client's purchase of one or more tickets."""

    _ids = itertools.count(1)

    def __init__(self, client_id: Optional[int] = None, payment_method: str = "") -> None:
        self.id = next(Purchase._ids)
        self.client_id = 0 if client_id is None else client_id
        self.payment_method = payment_method
        self.purchase_date = date.today().isoformat()
        self.subtotal = 0.0
        self.discount = 0.0
        self.total = 0.0
        self.status = PurchaseStatus.PENDING
        self.tickets: LinkedList[Ticket] = LinkedList()
        self.history: Stack[str] = Stack()
        self.validation_queue: Queue[Ticket] = Queue()
        if client_id is None:
            self._log("Compra inicializada vacia")
        else:
            self._log(f"Compra creada para cliente ID: {self.client_id}")

    def _log(self, action: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        self.history.push(f"[{timestamp}] {action}")

    @property
    def ticket_count(self) -> int:
        return len(self.tickets)

    def add_ticket(self, ticket: Ticket) -> None:
        self.tickets.append(ticket)
        self.subtotal += ticket.price
        self.total = self.subtotal - self.discount
        self._log(f"Entrada agregada: {ticket.code} - S/.{ticket.price:.2f}")

    def remove_ticket(self, index: int) -> Ticket:
        """Remove and return the ticket at ``index``; raise IndexError if absent."""
        ticket = self.tickets.get(index)
        self.subtotal -= ticket.price
        self.total = self.subtotal - self.discount
        self.tickets.remove_at(index)
        self._log(f"Entrada removida: {ticket.code} - S/.{ticket.price:.2f}")
        return ticket

    def apply_discount(self, percentage: float) -> None:
        if percentage < 0 or percentage > 100:
            raise ValueError("porcentaje de descuento invalido")
        self.discount = self.subtotal * (percentage / 100.0)
        self.total = self.subtotal - self.discount
        self._log(f"Descuento aplicado: {percentage:g}% - S/.{self.discount:.2f}")

    def finalize(self) -> None:
        """Complete the purchase, marking tickets used and queueing them for validation."""
        self.status = PurchaseStatus.COMPLETED
        self._log("Compra finalizada y marcada como COMPLETADA")
        for ticket in self.tickets:
            ticket.mark_used()
            self.validation_queue.enqueue(ticket)

    def validate_tickets(self) -> str:
        """Drain the validation queue and report on each ticket."""
        lines = ["=== VALIDANDO ENTRADAS ==="]
        while not self.validation_queue.is_empty():
            ticket = self.validation_queue.dequeue()
            if ticket.validate():
                lines.append(f"Entrada {ticket.code} validada correctamente.")
            else:
                lines.append(f"Entrada {ticket.code} invalida o ya utilizada.")
        lines.append("Todas las entradas han sido procesadas.")
        return "\n".join(lines)

    def summary(self) -> str:
        lines = [
            f"========= COMPRA #{self.id} =========",
            f"Cliente ID: {self.client_id}",
            f"Fecha: {self.purchase_date}",
            f"Estado: {self.status.value}",
            f"Metodo de pago: {self.payment_method}",
            f"Subtotal: S/.{self.subtotal:.2f}",
            f"Descuento aplicado: S/.{self.discount:.2f}",
            f"Total a pagar: S/.{self.total:.2f}",
            f"Cantidad de entradas: {len(self.tickets)}",
        ]
        lines.extend(f"{number}. {ticket}" for number, ticket in enumerate(self.tickets, 1))
        lines.append("=====================================")
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Purchase):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return (
            f"Compra #{self.id} | Cliente: {self.client_id} | Fecha: {self.purchase_date}"
            f" | Total: S/.{self.total:.2f}"
        )