from pydantic import Field, field_validator

from theater_booking.models import SeatingGrid
from theater_booking.schemas.base import CamelModel


class CapacitySchema(CamelModel):
    rows: int = Field(gt=0)
    columns: int = Field(gt=0)


class RoomBase(CamelModel):
    name: str = Field(min_length=1)
    capacity: CapacitySchema
    showtimes: list[str]


class RoomCreate(RoomBase):
    pass


class RoomResponse(RoomBase):
    id: int
    seating: list[list[int]]

    @field_validator("seating", mode="before")
    @classmethod
    def grid_to_rows(cls, value):
        if isinstance(value, SeatingGrid):
            return value.to_rows()
        return value


class TheaterBase(CamelModel):
    name: str = Field(min_length=1)
    location: str = Field(min_length=1)


class TheaterCreate(TheaterBase):
    rooms: list[RoomCreate]


class TheaterResponse(TheaterBase):
    id: int
    rooms: list[RoomResponse]
