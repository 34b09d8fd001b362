from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.movie_booking.app.interface.i_movie_repo import IMovieCommandRepo
from src.service.movie_booking.domain.entity.movie_entity import MovieEntity


class CreateMovieUseCase:
    def __init__(self, *, movie_command_repo: IMovieCommandRepo) -> None:
        self.movie_command_repo = movie_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        movie_command_repo: IMovieCommandRepo = Depends(Provide[Container.movie_command_repo]),
    ) -> Self:
        return cls(movie_command_repo=movie_command_repo)

    @Logger.io
    async def create_movie(
        self,
        *,
        title: str,
        price_per_seat: float,
        genre: Optional[str] = None,
        duration_minutes: Optional[int] = None,
    ) -> MovieEntity:
        # Entity validators reject blank titles and negative prices (ValueError -> 400)
        movie = MovieEntity(
            title=title,
            price_per_seat=price_per_seat,
            genre=genre,
            duration_minutes=duration_minutes,
        )
        return await self.movie_command_repo.create(movie=movie)
