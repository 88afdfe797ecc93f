from fastapi import APIRouter, Depends

from theater_booking.core.context import BookingContext, get_context


router = APIRouter()


@router.get("/health", summary="Basic health check endpoint")
async def health_check(context: BookingContext = Depends(get_context)):
    """
    Basic health check endpoint.
    Also reports how many booking requests are waiting in the queue.
    """
    return {"status": "ok", "queued": len(context.queue)}
