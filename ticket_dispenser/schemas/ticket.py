from pydantic import BaseModel, ConfigDict, Field, StrictInt


class TicketCounter(BaseModel):
    last_ticket: StrictInt = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)


class SequenceDraw(BaseModel):
    name: str
    ticket_number: int
    ticket_no: str


class SequenceRead(BaseModel):
    name: str
    last_ticket: int


class CounterDraw(BaseModel):
    ticket_number: int
    state: TicketCounter
