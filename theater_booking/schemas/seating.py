from pydantic import Field

from theater_booking.schemas.base import CamelModel


class SeatCell(CamelModel):
    x: int = Field(description="Column index")
    y: int = Field(description="Row index")
    value: int = Field(ge=0, le=1, description="1 when booked")
