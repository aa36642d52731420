import io

import pytest

from ticket_dispenser.demo import main
from ticket_dispenser.services import shared_counter
from ticket_dispenser.services.dispenser import TicketDispenser
from ticket_dispenser.services.display import print_counter_tickets, print_tickets
from ticket_dispenser.services.ticket_counter import INITIAL_COUNTER, TicketCounter


def test_print_tickets_writes_one_number_per_line(capsys):
    tickets = print_tickets(shared_counter.draw, 3)

    assert tickets == [1, 2, 3]
    assert capsys.readouterr().out == "1\n2\n3\n"


def test_print_tickets_to_stream():
    stream = io.StringIO()
    dispenser = TicketDispenser()

    print_tickets(dispenser.draw, 2, stream=stream)

    assert stream.getvalue() == "1\n2\n"


def test_print_counter_tickets_returns_final_state(capsys):
    state = print_counter_tickets(INITIAL_COUNTER, 2)

    assert state == TicketCounter(last_ticket=2)
    assert capsys.readouterr().out == "1\n2\n"


def test_demo_prints_all_scenarios(capsys):
    main()

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Shared counter:",
        "1",
        "2",
        "3",
        "Dispensers:",
        "1",
        "2",
        "1",
        "3",
        "Counter values:",
        "1",
        "2",
        "3",
        "3",
    ]


def test_print_counter_tickets_to_stream():
    stream = io.StringIO()

    state = print_counter_tickets(TicketCounter(last_ticket=4), 3, stream=stream)

    assert stream.getvalue() == "5\n6\n7\n"
    assert state.last_ticket == 7


@pytest.mark.parametrize("printer", ["tickets", "counter"])
def test_negative_count_is_rejected(printer, capsys):
    with pytest.raises(ValueError):
        if printer == "tickets":
            print_tickets(shared_counter.draw, -1)
        else:
            print_counter_tickets(INITIAL_COUNTER, -1)

    assert capsys.readouterr().out == ""
    assert shared_counter.last_ticket() == 0
