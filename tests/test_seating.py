import io

import pytest

from ticketeria.seating import Seat, Section, Venue


def test_seat_reserve_and_release():
    seat = Seat(7)
    assert seat.available
    seat.reserve()
    assert not seat.available
    seat.release()
    assert seat.available


def test_section_numbers_seats_from_one():
    section = Section("Principal", 10)
    assert section.seat_count == 10
    assert [seat.number for seat in section.seats] == list(range(1, 11))
    assert all(seat.available for seat in section.seats)


def test_find_seat():
    section = Section("VIP Gold", 5)
    assert section.find_seat(5).number == 5
    assert section.find_seat(6) is None
    assert section.find_seat(0) is None


def test_find_seat_returns_live_seat():
    section = Section("General", 3)
    section.find_seat(2).reserve()
    assert [seat.available for seat in section.seats] == [True, False, True]


def test_render_seats():
    section = Section("General", 2)
    section.find_seat(2).reserve()
    assert section.render_seats().splitlines() == [
        "Asiento [1] Disponible",
        "Asiento [2] Ocupado",
    ]


def test_render_available_skips_reserved():
    section = Section("General", 3)
    section.find_seat(1).reserve()
    lines = section.render_available().splitlines()
    assert len(lines) == 2
    assert all(line.endswith("Disponible") for line in lines)


def test_render_available_when_full():
    section = Section("General", 2)
    for seat in section.seats:
        seat.reserve()
    assert section.render_available() == "No hay asientos disponibles en esta seccion."


def test_save_format():
    section = Section("General", 2)
    section.find_seat(1).reserve()
    buffer = io.StringIO()
    section.save(buffer)
    assert buffer.getvalue().splitlines() == ["General 2", "1 0", "2 1"]


def test_save_load_round_trip():
    original = Section("VIP Gold", 4)
    original.find_seat(3).reserve()
    buffer = io.StringIO()
    original.save(buffer)
    buffer.seek(0)
    restored = Section()
    restored.load(buffer)
    assert restored.name == original.name
    assert restored.seats == original.seats


def test_load_several_sections_from_one_stream():
    first, second = Section("Principal", 2), Section("General", 3)
    second.find_seat(2).reserve()
    buffer = io.StringIO()
    first.save(buffer)
    second.save(buffer)
    buffer.seek(0)
    a, b = Section(), Section()
    a.load(buffer)
    b.load(buffer)
    assert (a.name, a.seats) == (first.name, first.seats)
    assert (b.name, b.seats) == (second.name, second.seats)


def test_load_rejects_truncated_input():
    section = Section()
    with pytest.raises(ValueError):
        section.load(io.StringIO("General 3\n1 1\n"))


def test_load_rejects_bad_header():
    with pytest.raises(ValueError):
        Section().load(io.StringIO("General many\n"))
    with pytest.raises(ValueError):
        Section().load(io.StringIO(""))


def test_venue_render():
    venue = Venue("Estadio Nacional")
    assert venue.section.name == "General"
    assert venue.render().splitlines()[0] == "Lugar: Estadio Nacional"


def test_venue_render_lists_section_seats():
    venue = Venue("Estadio Nacional")
    venue.section = Section("General", 2)
    lines = venue.render().splitlines()
    assert lines[1:] == venue.section.render_seats().splitlines()