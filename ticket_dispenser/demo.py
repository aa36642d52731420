from __future__ import annotations

from .services import shared_counter
from .services.dispenser import TicketDispenser
from .services.display import print_counter_tickets, print_tickets
from .services.ticket_counter import INITIAL_COUNTER


def main() -> None:
    print("Shared counter:")
    shared_counter.reset()
    print_tickets(shared_counter.draw, 3)

    print("Dispensers:")
    first = TicketDispenser()
    second = TicketDispenser()
    print_tickets(first.draw, 2)
    print_tickets(second.draw, 1)
    print_tickets(first.draw, 1)

    print("Counter values:")
    saved = print_counter_tickets(INITIAL_COUNTER, 2)
    # Same saved value twice: both print 3.
    print_counter_tickets(saved, 1)
    print_counter_tickets(saved, 1)


if __name__ == "__main__":
    main()
