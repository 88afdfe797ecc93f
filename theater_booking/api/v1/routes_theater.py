from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from theater_booking.core.context import BookingContext, get_context
from theater_booking.core.exceptions import TheaterNotFoundError
from theater_booking.crud.theater import crud_theater
from theater_booking.schemas.seating import SeatCell
from theater_booking.schemas.theater import TheaterCreate, TheaterResponse
from theater_booking.services.seating_view import seating_projection, seating_visualization


router = APIRouter(prefix="/theaters")


@router.post("", response_model=TheaterResponse, status_code=201)
async def create_theater(
        theater: TheaterCreate,
        context: BookingContext = Depends(get_context)):
    return TheaterResponse.model_validate(crud_theater.create_theater(context, theater))


@router.get("", response_model=list[TheaterResponse])
async def get_all_theaters(
        context: BookingContext = Depends(get_context)):
    return [TheaterResponse.model_validate(theater) for theater in crud_theater.get_all_theaters(context)]


@router.get("/{theater_id}", response_model=TheaterResponse)
async def get_theater(
        theater_id: int,
        context: BookingContext = Depends(get_context)):
    result = crud_theater.get_theater(context, theater_id)
    if result is None:
        raise TheaterNotFoundError(theater_id)
    return TheaterResponse.model_validate(result)


@router.get("/{theater_id}/rooms/{room_id}/seating", response_model=list[SeatCell])
async def get_seating(
        theater_id: int,
        room_id: int,
        context: BookingContext = Depends(get_context)):
    room = crud_theater.get_room(context, theater_id, room_id)
    return seating_projection(room)


@router.get("/{theater_id}/rooms/{room_id}/seating/visual", response_class=PlainTextResponse)
async def get_seating_visual(
        theater_id: int,
        room_id: int,
        context: BookingContext = Depends(get_context)):
    room = crud_theater.get_room(context, theater_id, room_id)
    return seating_visualization(room)
