"""
In-memory repository fakes

Implement the repository ports with plain dicts so API tests can run the
real use cases and controllers without PostgreSQL.
"""

from itertools import count
from typing import Dict, List, Optional

import attrs

from src.service.movie_booking.app.interface.i_booking_repo import IBookingRepo
from src.service.movie_booking.app.interface.i_movie_repo import (
    IMovieCommandRepo,
    IMovieQueryRepo,
)
from src.service.movie_booking.app.interface.i_user_repo import IUserCommandRepo, IUserQueryRepo
from src.service.movie_booking.domain.entity.booking_entity import Booking
from src.service.movie_booking.domain.entity.movie_entity import MovieEntity
from src.service.movie_booking.domain.entity.user_entity import UserEntity


class InMemoryBookingRepo(IBookingRepo):
    def __init__(self) -> None:
        self.bookings: Dict[int, Booking] = {}
        self._ids = count(1)

    async def save(self, *, booking: Booking) -> Booking:
        stored = booking if booking.id is not None else attrs.evolve(booking, id=next(self._ids))
        self.bookings[stored.id] = stored  # type: ignore[index]
        return attrs.evolve(stored)

    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        booking = self.bookings.get(booking_id)
        return attrs.evolve(booking) if booking else None

    async def list_by_user_id(self, *, user_id: int) -> List[Booking]:
        return [attrs.evolve(b) for b in self.bookings.values() if b.user_id == user_id]

    async def delete(self, *, booking: Booking) -> None:
        self.bookings.pop(booking.id, None)  # type: ignore[arg-type]


class InMemoryMovieRepo(IMovieQueryRepo, IMovieCommandRepo):
    def __init__(self) -> None:
        self.movies: Dict[int, MovieEntity] = {}
        self._ids = count(1)

    def add(self, movie: MovieEntity) -> MovieEntity:
        stored = movie if movie.id is not None else attrs.evolve(movie, id=next(self._ids))
        self.movies[stored.id] = stored  # type: ignore[index]
        return stored

    async def get_by_id(self, *, movie_id: int) -> Optional[MovieEntity]:
        return self.movies.get(movie_id)

    async def create(self, *, movie: MovieEntity) -> MovieEntity:
        return self.add(movie)


class InMemoryUserRepo(IUserQueryRepo, IUserCommandRepo):
    def __init__(self) -> None:
        self.users: Dict[int, UserEntity] = {}
        self._ids = count(1)

    def add(self, user: UserEntity) -> UserEntity:
        stored = user if user.id is not None else attrs.evolve(user, id=next(self._ids))
        self.users[stored.id] = stored  # type: ignore[index]
        return stored

    async def get_by_id(self, *, user_id: int) -> Optional[UserEntity]:
        return self.users.get(user_id)

    async def exists_by_email(self, *, email: str) -> bool:
        return any(user.email == email for user in self.users.values())

    async def create(self, *, user: UserEntity) -> UserEntity:
        return self.add(user)
