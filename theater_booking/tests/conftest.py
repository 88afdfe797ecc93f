import asyncio
from contextlib import suppress
from datetime import datetime, timezone

import pytest

from theater_booking.core.context import BookingContext
from theater_booking.crud.movie import crud_movie
from theater_booking.crud.theater import crud_theater
from theater_booking.schemas.movie import MovieCreate
from theater_booking.schemas.theater import TheaterCreate
from theater_booking.workers.booking_worker import booking_worker

SHOWTIME = "2024-01-01T10:00"


@pytest.fixture
def context():
    return BookingContext()


@pytest.fixture
def seeded_context(context):
    """One theater, one 2x2 room with a single showtime, one movie in that room."""
    theater = crud_theater.create_theater(context, TheaterCreate(
        name="Test Theater",
        location="Test City",
        rooms=[{"name": "Room A", "capacity": {"rows": 2, "columns": 2}, "showtimes": [SHOWTIME]}],
    ))
    movie = crud_movie.create_movie(context, MovieCreate(
        title="Test Movie",
        actor="Actor",
        actress="Actress",
        duration=120,
        theater_id=theater.id,
        room_id=1,
        showtime=datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc),
    ))
    return {"context": context, "theater": theater, "room": theater.rooms[0], "movie": movie}


@pytest.fixture
async def worker(context):
    """Run the booking worker against `context` for the duration of the test."""
    task = asyncio.create_task(booking_worker(context))
    yield task
    task.cancel()
    with suppress(asyncio.CancelledError):
        await task


@pytest.fixture
def make_payload():
    def booking_payload(movie, seats, showtime=SHOWTIME, **overrides):
        payload = {
            "movieId": movie.id,
            "theaterId": movie.theater_id,
            "roomId": movie.room_id,
            "showtime": showtime,
            "seats": [{"row": row, "col": col} for row, col in seats],
        }
        payload.update(overrides)
        return payload
    return booking_payload
