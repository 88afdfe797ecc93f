from fastapi import APIRouter, Depends

from theater_booking.core.context import BookingContext, get_context
from theater_booking.schemas.booking import BookingCreate, BookingResponse, SeatSchema

router = APIRouter()


@router.post("/book-ticket", response_model=BookingResponse)
async def book_ticket(
        data: BookingCreate,
        context: BookingContext = Depends(get_context)):
    # rejections are BookingError subclasses, rendered by the app-level handler
    booked = await context.queue.book(data)
    return BookingResponse(
        message="Tickets booked successfully",
        booked_seats=[SeatSchema(row=seat.row, col=seat.col) for seat in booked],
    )
