"""Console ticket office: events, seating, clients, tickets, purchases and promotions."""

__version__ = "0.1.0"