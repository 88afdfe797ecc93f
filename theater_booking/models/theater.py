from dataclasses import dataclass, field

from theater_booking.models.seating import SeatingGrid


@dataclass(frozen=True)
class Capacity:
    rows: int
    columns: int


@dataclass
class Room:
    # theater-local: room 1 exists in every theater that has a room
    id: int
    name: str
    capacity: Capacity
    showtimes: list[str]
    seating: SeatingGrid

    def has_showtime(self, showtime: str) -> bool:
        return showtime in self.showtimes


@dataclass
class Theater:
    id: int
    name: str
    location: str
    rooms: list[Room] = field(default_factory=list)

    def get_room(self, room_id: int) -> Room | None:
        return next((room for room in self.rooms if room.id == room_id), None)
