from datetime import datetime, timezone

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from theater_booking.core.context import BookingContext
from theater_booking.core.exceptions import MovieNotFoundError
from theater_booking.crud.theater import crud_theater
from theater_booking.models import Movie, Room
from theater_booking.schemas.movie import MovieCreate, MovieDetailResponse, MovieResponse


def as_utc(value: datetime) -> datetime:
    # naive timestamps are taken as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


DATETIME = TypeAdapter(datetime)


def parse_showtime(value: str) -> datetime | None:
    # bare numbers are opaque ids here, not unix timestamps
    if value.strip().isdigit():
        return None
    try:
        return as_utc(DATETIME.validate_python(value))
    except ValidationError:
        return None


def first_room_showtime(room: Room) -> datetime | None:
    parsed = [showtime for showtime in map(parse_showtime, room.showtimes) if showtime is not None]
    return min(parsed, default=None)


class CRUDMovie:
    def create_movie(self, context: BookingContext, data: MovieCreate) -> Movie:
        room = crud_theater.get_room(context, data.theater_id, data.room_id)
        showtime = as_utc(data.showtime) if data.showtime else first_room_showtime(room)
        movie = Movie(
            id=context.next_movie_id(),
            title=data.title,
            actor=data.actor,
            actress=data.actress,
            duration=data.duration,
            theater_id=data.theater_id,
            room_id=data.room_id,
            popularity=data.popularity,
            showtime=showtime,
        )
        context.movies.append(movie)
        logger.info(f"Registered movie {movie.id} '{movie.title}' in theater {movie.theater_id} room {movie.room_id}")
        return movie

    def get_movies(self, context: BookingContext, title: str | None = None, sort_by: str | None = None) -> list[MovieDetailResponse]:
        """
        Movies joined with their theater and room names.

        `title` filters by case-insensitive substring, `sort_by="popularity"`
        orders by descending popularity.
        """
        movies = list(context.movies)
        if title:
            needle = title.lower()
            movies = [movie for movie in movies if needle in movie.title.lower()]
        if sort_by == "popularity":
            movies = sorted(movies, key=lambda movie: movie.popularity, reverse=True)
        return [self._enrich(context, movie) for movie in movies]

    def get_popular_movies(self, context: BookingContext) -> list[Movie]:
        return sorted(context.movies, key=lambda movie: movie.popularity, reverse=True)

    def get_booked_tickets(self, context: BookingContext, title: str) -> Movie:
        needle = title.lower()
        movie = next((movie for movie in context.movies if movie.title.lower() == needle), None)
        if movie is None:
            raise MovieNotFoundError(message="Movie not found")
        return movie

    def _enrich(self, context: BookingContext, movie: Movie) -> MovieDetailResponse:
        theater = context.get_theater(movie.theater_id)
        room = theater.get_room(movie.room_id) if theater else None
        return MovieDetailResponse(
            **MovieResponse.model_validate(movie).model_dump(),
            theater=theater.name if theater else "Unknown Theater",
            room=room.name if room else "Unknown Room",
            showtimes=list(room.showtimes) if room else [],
        )


crud_movie = CRUDMovie()
