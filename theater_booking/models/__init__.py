from .seating import SeatingGrid
from .theater import Capacity, Room, Theater
from .movie import Movie, MovieStatus
from .booking import BookingState, BookingTicket, SeatPosition
