import asyncio

from loguru import logger
from pydantic import ValidationError

from theater_booking.core.exceptions import InvalidInputError
from theater_booking.models import BookingTicket, SeatPosition
from theater_booking.schemas.booking import BookingCreate


class BookingQueue:
    """
    FIFO of pending booking requests.

    Submitting never processes anything itself: the request is appended with a
    fresh future and the single booking worker resolves that future when it
    reaches the request.
    """

    def __init__(self):
        self._queue: asyncio.Queue[BookingTicket] = asyncio.Queue()

    def __len__(self) -> int:
        return self._queue.qsize()

    def empty(self) -> bool:
        return self._queue.empty()

    def submit(self, payload: BookingCreate | dict) -> BookingTicket:
        """Validate and enqueue. Must be called from inside the running event loop."""
        if not isinstance(payload, BookingCreate):
            try:
                payload = BookingCreate.model_validate(payload)
            except ValidationError as e:
                raise InvalidInputError(f"Invalid input data: {e.errors()[0]['msg']}") from e

        ticket = BookingTicket(
            movie_id=payload.movie_id,
            theater_id=payload.theater_id,
            room_id=payload.room_id,
            showtime=payload.showtime,
            seats=[SeatPosition(row=seat.row, col=seat.col) for seat in payload.seats],
            result=asyncio.get_running_loop().create_future(),
        )
        self._queue.put_nowait(ticket)
        logger.debug(f"Queued booking {ticket.request_id} ({len(self)} waiting)")
        return ticket

    async def book(self, payload: BookingCreate | dict) -> list[SeatPosition]:
        """Submit and wait for this request's own outcome. Rejections are raised."""
        ticket = self.submit(payload)
        return await ticket.result

    async def get(self) -> BookingTicket:
        return await self._queue.get()

    def task_done(self) -> None:
        self._queue.task_done()

    async def join(self) -> None:
        await self._queue.join()
