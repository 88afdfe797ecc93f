import asyncio
from dataclasses import dataclass, field
from enum import Enum
from uuid import uuid4


class BookingState(str, Enum):
    QUEUED = "queued"
    VALIDATING = "validating"
    APPLIED = "applied"
    REJECTED = "rejected"


@dataclass(frozen=True)
class SeatPosition:
    row: int
    col: int


@dataclass
class BookingTicket:
    """A queued booking request and the future its submitter is waiting on."""
    movie_id: int
    theater_id: int
    room_id: int
    showtime: str
    seats: list[SeatPosition]
    result: asyncio.Future
    request_id: str = field(default_factory=lambda: uuid4().hex)
    state: BookingState = BookingState.QUEUED

    def resolve(self, booked: list[SeatPosition]) -> None:
        self.state = BookingState.APPLIED
        if not self.result.done():
            self.result.set_result(booked)

    def reject(self, error: BaseException) -> None:
        self.state = BookingState.REJECTED
        if not self.result.done():
            self.result.set_exception(error)
