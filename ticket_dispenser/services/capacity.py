import logging

from ..config import settings
from ..errors import TicketOverflowError

logger = logging.getLogger(__name__)


def check_capacity(last_ticket: int) -> None:
    if last_ticket >= settings.max_ticket:
        logger.warning(
            "Ticket counter at limit: last_ticket=%s max_ticket=%s",
            last_ticket,
            settings.max_ticket,
        )
        raise TicketOverflowError(last_ticket, settings.max_ticket)
