from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.movie_booking.app.command.create_movie_use_case import CreateMovieUseCase
from src.service.movie_booking.app.query.get_movie_use_case import GetMovieUseCase
from src.service.movie_booking.driving_adapter.http_controller.schema.movie_schema import (
    MovieCreateRequest,
    MovieResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_movie(
    request: MovieCreateRequest,
    use_case: CreateMovieUseCase = Depends(CreateMovieUseCase.depends),
) -> MovieResponse:
    movie = await use_case.create_movie(
        title=request.title,
        price_per_seat=request.price_per_seat,
        genre=request.genre,
        duration_minutes=request.duration_minutes,
    )
    return MovieResponse.from_entity(movie)


@router.get('/{movie_id}')
@Logger.io
async def get_movie(
    movie_id: int,
    use_case: GetMovieUseCase = Depends(GetMovieUseCase.depends),
) -> MovieResponse:
    movie = await use_case.get_movie(movie_id=movie_id)
    return MovieResponse.from_entity(movie)
