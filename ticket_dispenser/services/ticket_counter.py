from ..schemas import TicketCounter
from .capacity import check_capacity

INITIAL_COUNTER = TicketCounter()


def draw(state: TicketCounter) -> tuple[int, TicketCounter]:
    """Return the next ticket number and the counter that follows ``state``.

    ``state`` is never modified; drawing from it again gives the same number.
    """
    check_capacity(state.last_ticket)
    ticket_number = state.last_ticket + 1
    return ticket_number, TicketCounter(last_ticket=ticket_number)


def draw_many(state: TicketCounter, count: int) -> tuple[list[int], TicketCounter]:
    if count < 0:
        raise ValueError("count must be zero or more")
    tickets: list[int] = []
    for _ in range(count):
        ticket_number, state = draw(state)
        tickets.append(ticket_number)
    return tickets, state
