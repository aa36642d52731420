from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.orm import Session

from ..db import get_db
from ..errors import TicketOverflowError
from ..models.base import utcnow
from ..schemas import CounterDraw, SequenceDraw, SequenceRead, TicketCounter
from ..services import sequences
from ..services import ticket_counter

router = APIRouter()

DispenserName = Annotated[str, Path(min_length=1, max_length=64)]


@router.post("/dispensers/{name}/draw", response_model=SequenceDraw)
def draw_ticket(name: DispenserName, db: Session = Depends(get_db)) -> SequenceDraw:
    now = utcnow()
    try:
        number = sequences.next_ticket_number(db, name, now=now)
    except TicketOverflowError as exc:
        db.rollback()
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    db.commit()
    return SequenceDraw(
        name=name,
        ticket_number=number,
        ticket_no=sequences.format_ticket_no(number, now=now),
    )


@router.get("/dispensers/{name}", response_model=SequenceRead)
def read_dispenser(name: DispenserName, db: Session = Depends(get_db)) -> SequenceRead:
    last_ticket = sequences.current_ticket_number(db, name)
    if last_ticket is None:
        raise HTTPException(status_code=404, detail=f"Unknown dispenser: {name}")
    return SequenceRead(name=name, last_ticket=last_ticket)


@router.post("/dispensers/{name}/reset", response_model=SequenceRead)
def reset_dispenser(name: DispenserName, db: Session = Depends(get_db)) -> SequenceRead:
    sequences.reset_sequence(db, name)
    db.commit()
    return SequenceRead(name=name, last_ticket=0)


@router.post("/counter/draw", response_model=CounterDraw)
def draw_from_counter(state: TicketCounter) -> CounterDraw:
    try:
        ticket_number, next_state = ticket_counter.draw(state)
    except TicketOverflowError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return CounterDraw(ticket_number=ticket_number, state=next_state)
