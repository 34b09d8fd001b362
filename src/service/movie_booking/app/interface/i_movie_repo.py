from abc import ABC, abstractmethod
from typing import Optional

from src.service.movie_booking.domain.entity.movie_entity import MovieEntity


class IMovieQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, movie_id: int) -> Optional[MovieEntity]:
        pass


class IMovieCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, movie: MovieEntity) -> MovieEntity:
        pass
