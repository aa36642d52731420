from .base import Base
from .ticket_sequence import TicketSequence

__all__ = [
    "Base",
    "TicketSequence",
]
