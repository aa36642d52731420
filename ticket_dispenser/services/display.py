from typing import Callable, TextIO

from ..schemas import TicketCounter
from .ticket_counter import draw_many


def print_tickets(
    draw_ticket: Callable[[], int], count: int, stream: TextIO | None = None
) -> list[int]:
    """Draw ``count`` tickets and write each number on its own line.

    ``stream`` defaults to standard output.
    """
    if count < 0:
        raise ValueError("count must be zero or more")
    tickets = []
    for _ in range(count):
        ticket_number = draw_ticket()
        print(ticket_number, file=stream)
        tickets.append(ticket_number)
    return tickets


def print_counter_tickets(
    state: TicketCounter, count: int, stream: TextIO | None = None
) -> TicketCounter:
    tickets, state = draw_many(state, count)
    for ticket_number in tickets:
        print(ticket_number, file=stream)
    return state
