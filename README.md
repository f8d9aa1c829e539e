# ticketeria

A small console ticket office. It keeps a catalogue of events (concerts,
plays, sports matches and festivals). Each event has three seating
sections. The package also provides the pieces needed to sell tickets:
clients with loyalty points, tickets, purchases with discounts,
administrators and promotions.

It has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running the ticket office

```
ticketeria
```

This draws the main menu in the terminal. The menu uses ANSI escape
sequences for colours and cursor placement. Type an option number and
press Enter.

Option `1` opens the events module. It loads a set of sample events and
lets you do the following:

- list every event, ordered by date;
- look up the first event in a month (`MM`, for example `06`); each event
  you find is added to a history;
- take the most recent event off that history and show it;
- pick an event and a section, then see each seat with its state,
  `Disponible` or `Ocupado`.

Option `0` leaves the program.

## Using it as a library

### Collections

`ticketeria.structures` has `LinkedList`, `Queue` and `Stack`. They work
with ordinary Python iteration and `len`. Reading from an empty queue or
stack raises `IndexError`, and so does using a position that is out of
range.

```python
from ticketeria.structures import LinkedList, Queue, Stack

names = LinkedList(["RockFest", "Hamlet"])
names.append("Book Fest")
print(len(names), list(names))

pending = Queue([1, 2, 3])
print(pending.dequeue())          # 1

history = Stack(["first", "second"])
print(history.peek())             # second
```

### Seating

`Section` numbers its seats from 1. `save` writes a section to a text
stream and `load` reads it back.

```python
from ticketeria.seating import Section

vip = Section("VIP Gold", 5)
vip.find_seat(3).reserve()
print(vip.render_available())
```

### Events and the event manager

Events get increasing ids as they are created. `EventManager` keeps them
ordered by date, finds them by month or id, and can write the seat state
of every event to a file with `save_seats`.

```python
from ticketeria.events import Concert, Play
from ticketeria.manager import EventManager

manager = EventManager()
manager.add_event(Concert("RockFest", "2025-06-10", "Estadio San Marcos", 150, "Los Riffs"))
manager.add_event(Play("Hamlet", "2025-08-15", "Teatro Municipal", 90, "Juan Perez", 120))

print(manager.find_by_month("08").describe())
```

### Tickets and purchases

A `Ticket` gets a random eight-character code. It stays valid while it is
unused and bound to a positive event id and seat id. A `Purchase` tracks
its subtotal, discount and total, and keeps a log of what was done to it.
`apply_discount` raises `ValueError` for a percentage outside 0–100.

```python
from ticketeria.purchases import Purchase
from ticketeria.tickets import Ticket

purchase = Purchase(7, "card")
purchase.add_ticket(Ticket(event_id=1, seat_id=3, price=150.0))
purchase.apply_discount(15)
print(purchase.summary())

purchase.finalize()
print(purchase.validate_tickets())
```

### People

`Person`, `Administrator` and `Client` in `ticketeria.people` can be
written to and read from comma-separated records with `to_record` and
`from_record`.

```python
from ticketeria.people import Administrator, Client

password = "password"
admin = Administrator(1, "Ana", "Lopez", "ana@example.com", "", password=password)
print(admin.validate_access(password))

client = Client(2, "Juan", "Perez", "juan@example.com", "", "Av. Central")
client.add_points(20)
print(client.redeem_points(10), client.loyalty_points)
```

### Discounts

`Discount` objects compare by their percentage. `Discount.find`,
`Discount.filter_describe` and `Discount.apply_change` work over any
sequence of discounts, using a criterion that you pass in.

## What it does not do

Options `2` (users and purchases) and `3` (administrative services) of
the main menu only show "Modulo no disponible.". Clients, purchases,
administrators, discounts and reviews cannot be managed from the
terminal. They are available only as library classes. Nothing is
stored between runs: the command always starts from the sample events.