from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import is_storable_id
from src.platform.logging.loguru_io import Logger
from src.service.movie_booking.app.interface.i_movie_repo import (
    IMovieCommandRepo,
    IMovieQueryRepo,
)
from src.service.movie_booking.domain.entity.movie_entity import MovieEntity
from src.service.movie_booking.driven_adapter.model.movie_model import MovieModel


def _model_to_entity(movie_model: MovieModel) -> MovieEntity:
    return MovieEntity(
        id=movie_model.id,
        title=movie_model.title,
        genre=movie_model.genre,
        duration_minutes=movie_model.duration_minutes,
        price_per_seat=movie_model.price_per_seat,
    )


class MovieQueryRepoImpl(IMovieQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, movie_id: int) -> Optional[MovieEntity]:
        if not is_storable_id(movie_id):
            return None
        async with self.session_factory() as session:
            result = await session.execute(select(MovieModel).where(MovieModel.id == movie_id))
            movie_model = result.scalar_one_or_none()

            if not movie_model:
                return None

            return _model_to_entity(movie_model)


class MovieCommandRepoImpl(IMovieCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, movie: MovieEntity) -> MovieEntity:
        async with self.session_factory() as session:
            movie_model = MovieModel(
                title=movie.title,
                genre=movie.genre,
                duration_minutes=movie.duration_minutes,
                price_per_seat=movie.price_per_seat,
            )

            session.add(movie_model)
            await session.commit()
            await session.refresh(movie_model)

            return _model_to_entity(movie_model)
