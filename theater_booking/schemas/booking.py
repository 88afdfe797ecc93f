from pydantic import Field, model_validator

from theater_booking.schemas.base import CamelModel


class SeatSchema(CamelModel):
    row: int
    col: int


class BookingCreate(CamelModel):
    movie_id: int
    theater_id: int
    room_id: int
    showtime: str = Field(min_length=1)
    seats: list[SeatSchema] = Field(min_length=1)

    @model_validator(mode="after")
    def no_repeated_seats(self):
        seen = set()
        for seat in self.seats:
            if (seat.row, seat.col) in seen:
                raise ValueError(f"Seat at row {seat.row} and col {seat.col} is requested more than once")
            seen.add((seat.row, seat.col))
        return self


class BookingResponse(CamelModel):
    message: str
    booked_seats: list[SeatSchema]
