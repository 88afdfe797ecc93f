from dataclasses import dataclass, field

from fastapi import Request

from theater_booking.models import Movie, Theater
from theater_booking.services.booking_queue import BookingQueue


@dataclass
class BookingContext:
    """All process-wide state. Created empty at start-up, never persisted."""
    theaters: list[Theater] = field(default_factory=list)
    movies: list[Movie] = field(default_factory=list)
    queue: BookingQueue = field(default_factory=BookingQueue)

    def next_theater_id(self) -> int:
        return len(self.theaters) + 1

    def next_movie_id(self) -> int:
        return len(self.movies) + 1

    def get_theater(self, theater_id: int) -> Theater | None:
        return next((theater for theater in self.theaters if theater.id == theater_id), None)


def get_context(request: Request) -> BookingContext:
    """FastAPI dependency returning the context attached to the running app."""
    return request.app.state.context
