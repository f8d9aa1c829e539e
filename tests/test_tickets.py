import pytest

from ticketeria.tickets import CODE_ALPHABET, Ticket, generate_code


def test_generate_code_shape():
    for _ in range(50):
        code = generate_code()
        assert len(code) == 8
        assert all(char in CODE_ALPHABET for char in code)


def test_new_tickets_get_distinct_codes():
    codes = {Ticket(1, 1, 10.0).code for _ in range(20)}
    assert len(codes) > 1


def test_validate_requires_event_and_seat():
    assert Ticket(1, 2, 10.0).validate() is True
    assert Ticket(0, 2, 10.0).validate() is False
    assert Ticket(1, 0, 10.0).validate() is False


def test_mark_used_invalidates():
    ticket = Ticket(1, 2, 10.0)
    ticket.mark_used()
    assert ticket.used is True
    assert ticket.validate() is False


def test_record_round_trip():
    ticket = Ticket(3, 4, 150.5, used=True, code="ABCD1234", issue_date="2025-06-10")
    loaded = Ticket.from_record(ticket.to_record())
    assert loaded.code == "ABCD1234"
    assert loaded.event_id == 3
    assert loaded.seat_id == 4
    assert loaded.price == pytest.approx(150.5)
    assert loaded.used is True
    assert loaded.issue_date == "2025-06-10"


def test_record_format():
    ticket = Ticket(3, 4, 150.0, code="ABCD1234", issue_date="2025-06-10")
    assert ticket.to_record() == "ABCD1234,3,4,150,0,2025-06-10"


def test_from_record_without_commas_sets_only_date():
    ticket = Ticket.from_record("2025-01-01")
    assert ticket.issue_date == "2025-01-01"
    assert ticket.event_id == 0
    assert len(ticket.code) == 8


def test_from_record_bad_number_raises():
    with pytest.raises(ValueError):
        Ticket.from_record("ABCD1234,x,4,150,0,2025-06-10")


def test_equality_by_code():
    first = Ticket(1, 1, 10.0, code="SAMECODE")
    second = Ticket(2, 5, 99.0, code="SAMECODE")
    third = Ticket(1, 1, 10.0, code="OTHERONE")
    assert first == second
    assert not first == third


def test_str_marks_used_tickets():
    ticket = Ticket(1, 2, 10.0, code="ABCD1234")
    assert "(UTILIZADA)" not in str(ticket)
    ticket.mark_used()
    assert str(ticket).endswith("(UTILIZADA)")
    assert "Entrada [ABCD1234]" in str(ticket)


def test_printout_states_usage():
    ticket = Ticket(1, 2, 10.0, code="ABCD1234")
    assert "Estado: NO UTILIZADA" in ticket.printout()
    ticket.mark_used()
    assert "Estado: UTILIZADA" in ticket.printout()
    assert "ENTRADA ABCD1234" in ticket.printout()