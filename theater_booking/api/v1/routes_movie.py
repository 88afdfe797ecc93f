from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query

from theater_booking.core.context import BookingContext, get_context
from theater_booking.crud.movie import crud_movie
from theater_booking.schemas.movie import MovieCreate, MovieDetailResponse, MovieResponse, MovieTicketsResponse

router = APIRouter(
    prefix="/movies"
)


@router.post("", response_model=MovieResponse, status_code=201)
async def create_movie(movie: MovieCreate, context: BookingContext = Depends(get_context)):
    return MovieResponse.model_validate(crud_movie.create_movie(context, movie))


@router.get("", response_model=list[MovieDetailResponse])
async def get_movies(
        title: Optional[str] = None,
        sort_by: Optional[str] = Query(default=None, alias="sortBy"),
        context: BookingContext = Depends(get_context)):
    return crud_movie.get_movies(context, title=title, sort_by=sort_by)


@router.get("/popular", response_model=list[MovieResponse])
async def get_popular_movies(context: BookingContext = Depends(get_context)):
    return [MovieResponse.model_validate(movie) for movie in crud_movie.get_popular_movies(context)]


@router.get("/tickets", response_model=MovieTicketsResponse)
async def get_booked_tickets(title: Optional[str] = None, context: BookingContext = Depends(get_context)):
    if not title:
        raise HTTPException(status_code=400, detail="Movie title is required")
    movie = crud_movie.get_booked_tickets(context, title)
    return MovieTicketsResponse(title=movie.title, booked_tickets=movie.booked_tickets)
