from .ticket import CounterDraw, SequenceDraw, SequenceRead, TicketCounter

__all__ = ["CounterDraw", "SequenceDraw", "SequenceRead", "TicketCounter"]
