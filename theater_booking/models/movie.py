from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum


class MovieStatus(str, Enum):
    PENDING = "pending"
    STARTED = "started"
    DONE = "done"


@dataclass
class Movie:
    id: int
    title: str
    actor: str
    actress: str
    duration: int  # minutes
    theater_id: int
    room_id: int
    popularity: float = 0
    status: MovieStatus = MovieStatus.PENDING
    booked_tickets: int = 0
    showtime: datetime | None = None

    @property
    def ends_at(self) -> datetime | None:
        if self.showtime is None:
            return None
        return self.showtime + timedelta(minutes=self.duration)

    def matches(self, movie_id: int, theater_id: int, room_id: int) -> bool:
        return self.id == movie_id and self.theater_id == theater_id and self.room_id == room_id
