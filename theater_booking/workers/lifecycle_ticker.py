import asyncio
from datetime import datetime, timezone

from loguru import logger

from theater_booking.core.context import BookingContext
from theater_booking.models import Movie, MovieStatus


def next_status(status: MovieStatus, showtime: datetime | None, ends_at: datetime | None, now: datetime) -> MovieStatus:
    """At most one step forward per call; done is terminal."""
    if showtime is None or ends_at is None:
        return status
    if status == MovieStatus.PENDING and now >= showtime:
        return MovieStatus.STARTED
    if status == MovieStatus.STARTED and now >= ends_at:
        return MovieStatus.DONE
    return status


def tick(context: BookingContext, now: datetime | None = None) -> list[Movie]:
    now = now or datetime.now(timezone.utc)
    changed = []
    for movie in list(context.movies):
        status = next_status(movie.status, movie.showtime, movie.ends_at, now)
        if status != movie.status:
            logger.info(f"Movie {movie.id} '{movie.title}' {movie.status.value} -> {status.value}")
            movie.status = status
            changed.append(movie)
    return changed


class LifecycleTicker:
    def __init__(self, context: BookingContext, interval: float):
        self.context = context
        self.interval = interval

    async def run(self):
        logger.info(f"Lifecycle ticker started, every {self.interval}s")
        try:
            while True:
                await asyncio.sleep(self.interval)
                try:
                    tick(self.context)
                except Exception:
                    logger.exception("Lifecycle tick failed")
        finally:
            logger.info("Lifecycle ticker stopped")
