"""Process-wide ticket counter.

Every caller in the process draws from the same hidden number, so two parts
of a program cannot hand out tickets independently. Prefer ``TicketDispenser``
or an explicitly passed ``TicketCounter``.
"""

from .capacity import check_capacity

_last_ticket = 0


def draw() -> int:
    global _last_ticket
    check_capacity(_last_ticket)
    _last_ticket += 1
    return _last_ticket


def last_ticket() -> int:
    return _last_ticket


def reset() -> None:
    global _last_ticket
    _last_ticket = 0
