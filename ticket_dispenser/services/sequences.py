from datetime import datetime
import logging

from sqlalchemy import select, text
from sqlalchemy.orm import Session

from ..config import settings
from ..errors import TicketOverflowError
from ..models import TicketSequence
from ..models.base import utcnow

logger = logging.getLogger(__name__)


def _ensure_sequence(db: Session, name: str, now: datetime) -> None:
    db.execute(
        text(
            "INSERT OR IGNORE INTO ticket_sequences (name, last_number, updated_at) "
            "VALUES (:name, 0, :updated_at)"
        ),
        {"name": name, "updated_at": now},
    )


def next_ticket_number(db: Session, name: str, now: datetime | None = None) -> int:
    """Issue the next number for ``name`` inside the caller's transaction."""
    current_time = now or utcnow()
    _ensure_sequence(db, name, current_time)
    result = db.execute(
        text(
            "UPDATE ticket_sequences "
            "SET last_number = last_number + 1, updated_at = :updated_at "
            "WHERE name = :name AND last_number < :max_ticket"
        ),
        {"name": name, "updated_at": current_time, "max_ticket": settings.max_ticket},
    )
    if result.rowcount == 0:
        last_number = current_ticket_number(db, name) or 0
        logger.warning(
            "Ticket sequence %s at limit: last_number=%s max_ticket=%s",
            name,
            last_number,
            settings.max_ticket,
        )
        raise TicketOverflowError(last_number, settings.max_ticket)

    next_number = db.execute(
        text("SELECT last_number FROM ticket_sequences WHERE name = :name"),
        {"name": name},
    ).scalar_one()
    logger.info("Issued ticket %s from sequence %s", next_number, name)
    return next_number


def current_ticket_number(db: Session, name: str) -> int | None:
    return db.execute(
        select(TicketSequence.last_number).where(TicketSequence.name == name)
    ).scalar_one_or_none()


def reset_sequence(db: Session, name: str, now: datetime | None = None) -> None:
    current_time = now or utcnow()
    _ensure_sequence(db, name, current_time)
    db.execute(
        text(
            "UPDATE ticket_sequences "
            "SET last_number = 0, updated_at = :updated_at "
            "WHERE name = :name"
        ),
        {"name": name, "updated_at": current_time},
    )
    logger.info("Reset ticket sequence %s", name)


def format_ticket_no(number: int, now: datetime | None = None) -> str:
    current_time = now or utcnow()
    return f"{str(current_time.year)[2:]}-{number:05d}"
