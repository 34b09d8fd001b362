from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.movie_booking.app.interface.i_movie_repo import IMovieQueryRepo
from src.service.movie_booking.domain.entity.movie_entity import MovieEntity


class GetMovieUseCase:
    def __init__(self, *, movie_query_repo: IMovieQueryRepo) -> None:
        self.movie_query_repo = movie_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        movie_query_repo: IMovieQueryRepo = Depends(Provide[Container.movie_query_repo]),
    ) -> Self:
        return cls(movie_query_repo=movie_query_repo)

    @Logger.io
    async def get_movie(self, *, movie_id: int) -> MovieEntity:
        movie = await self.movie_query_repo.get_by_id(movie_id=movie_id)

        if not movie:
            raise NotFoundError('Movie not found')

        return movie
