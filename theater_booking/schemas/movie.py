from datetime import datetime
from typing import Optional
from pydantic import Field

from theater_booking.models import MovieStatus
from theater_booking.schemas.base import CamelModel


class MovieBase(CamelModel):
    title: str = Field(min_length=1)
    actor: str = Field(min_length=1)
    actress: str = Field(min_length=1)
    duration: int = Field(gt=0, description="Running time in minutes")
    theater_id: int
    room_id: int
    popularity: float = Field(default=0, ge=0)


class MovieCreate(MovieBase):
    showtime: Optional[datetime] = None


class MovieResponse(MovieBase):
    id: int
    status: MovieStatus
    booked_tickets: int
    showtime: Optional[datetime] = None


class MovieDetailResponse(MovieResponse):
    theater: str
    room: str
    showtimes: list[str]


class MovieTicketsResponse(CamelModel):
    title: str
    booked_tickets: int
