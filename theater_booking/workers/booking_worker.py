import asyncio

from loguru import logger

from theater_booking.core.context import BookingContext
from theater_booking.core.exceptions import BookingError
from theater_booking.crud.booking import crud_booking
from theater_booking.models import BookingTicket


def process_ticket(context: BookingContext, ticket: BookingTicket) -> None:
    """Run one queued request to its terminal state and resolve its future."""
    try:
        booked = crud_booking.apply_booking(context, ticket)
    except BookingError as e:
        ticket.reject(e)
        logger.info(f"Booking {ticket.request_id} rejected: {e.kind} {e.message}")
    except Exception as e:
        # an unexpected bug must not take the worker down with it
        logger.exception(f"Booking {ticket.request_id} failed unexpectedly")
        ticket.reject(e)
    else:
        ticket.resolve(booked)
        logger.info(f"Booking {ticket.request_id} applied: {len(booked)} seat(s) for movie {ticket.movie_id}")


async def booking_worker(context: BookingContext):
    queue = context.queue
    logger.info("Booking worker started")
    try:
        while True:
            ticket = await queue.get()
            try:
                process_ticket(context, ticket)
            finally:
                queue.task_done()
            # let handlers and the ticker run between items
            await asyncio.sleep(0)
    finally:
        logger.info("Booking worker stopped")
