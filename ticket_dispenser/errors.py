class TicketDispenserError(Exception):
    """Base class for ticket dispenser errors."""


class TicketOverflowError(TicketDispenserError):
    def __init__(self, last_ticket: int, max_ticket: int) -> None:
        self.last_ticket = last_ticket
        self.max_ticket = max_ticket
        super().__init__(
            f"Ticket counter exhausted: last ticket {last_ticket} "
            f"is at the limit of {max_ticket}."
        )
