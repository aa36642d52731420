from .capacity import check_capacity


class TicketDispenser:
    """Hands out ticket numbers 1, 2, 3, ... from its own private counter."""

    def __init__(self) -> None:
        self._last_ticket = 0

    @property
    def last_ticket(self) -> int:
        return self._last_ticket

    def draw(self) -> int:
        check_capacity(self._last_ticket)
        self._last_ticket += 1
        return self._last_ticket

    def __repr__(self) -> str:
        return f"TicketDispenser(last_ticket={self._last_ticket})"
