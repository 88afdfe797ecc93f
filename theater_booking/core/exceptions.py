class BookingError(Exception):
    kind = "BookingError"

    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.kind, "message": self.message}


class InvalidInputError(BookingError):
    kind = "InvalidInput"

    def __init__(self, message: str = "Invalid input data"):
        super().__init__(message, status_code=422)


class NotFoundError(BookingError):
    kind = "NotFound"

    def __init__(self, message: str):
        super().__init__(message, status_code=404)


class TheaterNotFoundError(NotFoundError):
    kind = "TheaterNotFound"

    def __init__(self, theater_id: int | None = None):
        self.theater_id = theater_id
        super().__init__("Theater not found")


class RoomNotFoundError(NotFoundError):
    kind = "RoomNotFound"

    def __init__(self, room_id: int | None = None):
        self.room_id = room_id
        super().__init__("Room not found in the selected theater")


class MovieNotFoundError(NotFoundError):
    kind = "MovieNotFound"

    def __init__(self, movie_id: int | None = None, message: str = "Movie not found in the selected theater/room"):
        self.movie_id = movie_id
        super().__init__(message)


class InvalidShowtimeError(NotFoundError):
    kind = "InvalidShowtime"

    def __init__(self, showtime: str | None = None):
        self.showtime = showtime
        super().__init__("Invalid showtime")


class SeatError(BookingError):
    """A seat-level failure, reported with the offending coordinates."""
    kind = "SeatError"
    reason = "invalid"

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        super().__init__(f"Seat at row {row} and col {col} is {self.reason}", status_code=400)

    def to_dict(self) -> dict:
        return {**super().to_dict(), "row": self.row, "col": self.col}


class SeatOutOfBoundsError(SeatError):
    kind = "SeatOutOfBounds"
    reason = "out of bounds"


class SeatAlreadyBookedError(SeatError):
    kind = "SeatAlreadyBooked"
    reason = "already booked"
