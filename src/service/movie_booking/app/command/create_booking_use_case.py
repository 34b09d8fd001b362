from datetime import datetime
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import booking_metrics
from src.service.movie_booking.app.interface.i_booking_repo import IBookingRepo
from src.service.movie_booking.app.interface.i_movie_repo import IMovieQueryRepo
from src.service.movie_booking.app.interface.i_user_repo import IUserQueryRepo
from src.service.movie_booking.domain.entity.booking_entity import Booking


class CreateBookingUseCase:
    """
    Create booking use case

    Flow:
    1. Resolve user (NotFoundError if absent)
    2. Resolve movie (NotFoundError if absent)
    3. Build Booking: booking_time=now, status=Booked, total_price=seats * price_per_seat
    4. Persist and return the stored booking (with assigned id)

    Nothing is written when either lookup fails. Seat availability and
    duplicate bookings are not checked.
    """

    def __init__(
        self,
        *,
        booking_repo: IBookingRepo,
        user_query_repo: IUserQueryRepo,
        movie_query_repo: IMovieQueryRepo,
    ) -> None:
        self.booking_repo = booking_repo
        self.user_query_repo = user_query_repo
        self.movie_query_repo = movie_query_repo
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        booking_repo: IBookingRepo = Depends(Provide[Container.booking_repo]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        movie_query_repo: IMovieQueryRepo = Depends(Provide[Container.movie_query_repo]),
    ) -> Self:
        return cls(
            booking_repo=booking_repo,
            user_query_repo=user_query_repo,
            movie_query_repo=movie_query_repo,
        )

    @Logger.io
    async def create_booking(
        self,
        *,
        user_id: int,
        movie_id: int,
        show_time: datetime,
        seats: int,
    ) -> Booking:
        with self.tracer.start_as_current_span(
            'use_case.create_booking',
            attributes={'user.id': user_id, 'movie.id': movie_id, 'booking.seats': seats},
        ) as span:
            user = await self.user_query_repo.get_by_id(user_id=user_id)
            if not user:
                raise NotFoundError('User not found')

            movie = await self.movie_query_repo.get_by_id(movie_id=movie_id)
            if not movie:
                raise NotFoundError('Movie not found')

            booking = Booking.create(
                user_id=user_id,
                movie_id=movie_id,
                show_time=show_time,
                seats=seats,
                price_per_seat=movie.price_per_seat,
            )
            saved_booking = await self.booking_repo.save(booking=booking)

            span.set_attribute('booking.id', saved_booking.id or 0)
            booking_metrics.record_booking_created(seats=seats)
            Logger.base.info(
                f'📝 [CREATE-BOOKING] Booking {saved_booking.id} for user {user_id}, '
                f'movie {movie_id}, {seats} seat(s), total {saved_booking.total_price}'
            )

            return saved_booking
