from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import is_storable_id
from src.platform.logging.loguru_io import Logger
from src.service.movie_booking.app.interface.i_booking_repo import IBookingRepo
from src.service.movie_booking.domain.entity.booking_entity import Booking, BookingStatus
from src.service.movie_booking.driven_adapter.model.booking_model import BookingModel


class BookingRepoImpl(IBookingRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @staticmethod
    def _to_model(booking: Booking) -> BookingModel:
        return BookingModel(
            id=booking.id,
            user_id=booking.user_id,
            movie_id=booking.movie_id,
            booking_time=booking.booking_time,
            show_time=booking.show_time,
            seats=booking.seats,
            total_price=booking.total_price,
            status=booking.status.value,
        )

    @staticmethod
    def _to_entity(db_booking: BookingModel) -> Booking:
        return Booking(
            id=db_booking.id,
            user_id=db_booking.user_id,
            movie_id=db_booking.movie_id,
            booking_time=db_booking.booking_time,
            show_time=db_booking.show_time,
            seats=db_booking.seats,
            total_price=db_booking.total_price,
            status=BookingStatus(db_booking.status),
        )

    @Logger.io
    async def save(self, *, booking: Booking) -> Booking:
        async with self.session_factory() as session:
            if booking.id is None:
                db_booking = self._to_model(booking)
                session.add(db_booking)
            else:
                db_booking = await session.merge(self._to_model(booking))
            await session.commit()
            await session.refresh(db_booking)

            return self._to_entity(db_booking)

    @Logger.io
    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        if not is_storable_id(booking_id):
            return None
        async with self.session_factory() as session:
            result = await session.execute(
                select(BookingModel).where(BookingModel.id == booking_id)
            )
            db_booking = result.scalar_one_or_none()

            if not db_booking:
                return None

            return self._to_entity(db_booking)

    @Logger.io
    async def list_by_user_id(self, *, user_id: int) -> List[Booking]:
        if not is_storable_id(user_id):
            return []
        async with self.session_factory() as session:
            result = await session.execute(
                select(BookingModel)
                .where(BookingModel.user_id == user_id)
                .order_by(BookingModel.id)
            )
            return [self._to_entity(db_booking) for db_booking in result.scalars().all()]

    @Logger.io
    async def delete(self, *, booking: Booking) -> None:
        async with self.session_factory() as session:
            await session.execute(delete(BookingModel).where(BookingModel.id == booking.id))
            await session.commit()
