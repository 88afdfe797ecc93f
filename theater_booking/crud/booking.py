from theater_booking.core.context import BookingContext
from theater_booking.core.exceptions import InvalidShowtimeError, MovieNotFoundError, SeatAlreadyBookedError
from theater_booking.crud.theater import crud_theater
from theater_booking.models import BookingState, BookingTicket, SeatPosition


class CRUDBooking:
    # .1 resolve theater, room, and the movie by the full (movie, theater, room) triple.
    # .2 check the showtime belongs to the room.
    # .3 check ALL seats first: bounds, then occupancy. nothing is booked on failure.
    # .4 book every seat and bump the movie counter.
    #
    # there is no await in here, so no other coroutine can see a half-applied request.
    def apply_booking(self, context: BookingContext, ticket: BookingTicket) -> list[SeatPosition]:
        ticket.state = BookingState.VALIDATING
        room = crud_theater.get_room(context, ticket.theater_id, ticket.room_id)

        movie = next((movie for movie in context.movies
                      if movie.matches(ticket.movie_id, ticket.theater_id, ticket.room_id)), None)
        if movie is None:
            raise MovieNotFoundError(ticket.movie_id)

        if not room.has_showtime(ticket.showtime):
            raise InvalidShowtimeError(ticket.showtime)

        seating = room.seating
        for seat in ticket.seats:
            # is_free raises SeatOutOfBoundsError itself
            if not seating.is_free(seat.row, seat.col):
                raise SeatAlreadyBookedError(seat.row, seat.col)

        for seat in ticket.seats:
            seating.book(seat.row, seat.col)
        movie.booked_tickets += len(ticket.seats)
        return list(ticket.seats)


crud_booking = CRUDBooking()
