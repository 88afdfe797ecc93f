from loguru import logger

from theater_booking.core.context import BookingContext
from theater_booking.core.exceptions import RoomNotFoundError, TheaterNotFoundError
from theater_booking.models import Capacity, Room, SeatingGrid, Theater
from theater_booking.schemas.theater import TheaterCreate


class CRUDTheater:
    def get_theater(self, context: BookingContext, theater_id: int) -> Theater | None:
        return context.get_theater(theater_id)

    def get_all_theaters(self, context: BookingContext) -> list[Theater]:
        return list(context.theaters)

    def get_room(self, context: BookingContext, theater_id: int, room_id: int) -> Room:
        theater = context.get_theater(theater_id)
        if theater is None:
            raise TheaterNotFoundError(theater_id)
        room = theater.get_room(room_id)
        if room is None:
            raise RoomNotFoundError(room_id)
        return room

    def create_theater(self, context: BookingContext, data: TheaterCreate) -> Theater:
        rooms = []
        for index, room_data in enumerate(data.rooms):
            capacity = Capacity(rows=room_data.capacity.rows, columns=room_data.capacity.columns)
            rooms.append(Room(
                id=index + 1,
                name=room_data.name,
                capacity=capacity,
                showtimes=list(dict.fromkeys(room_data.showtimes)),
                seating=SeatingGrid.allocate(capacity.rows, capacity.columns),
            ))
        theater = Theater(
            id=context.next_theater_id(),
            name=data.name,
            location=data.location,
            rooms=rooms,
        )
        context.theaters.append(theater)
        logger.info(f"Registered theater {theater.id} '{theater.name}' with {len(rooms)} room(s)")
        return theater


crud_theater = CRUDTheater()
