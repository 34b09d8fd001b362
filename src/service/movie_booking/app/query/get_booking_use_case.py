from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.movie_booking.app.interface.i_booking_repo import IBookingRepo
from src.service.movie_booking.domain.entity.booking_entity import Booking


class GetBookingUseCase:
    def __init__(self, *, booking_repo: IBookingRepo) -> None:
        self.booking_repo = booking_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_repo: IBookingRepo = Depends(Provide[Container.booking_repo]),
    ) -> Self:
        return cls(booking_repo=booking_repo)

    @Logger.io
    async def get_booking(self, *, booking_id: int) -> Optional[Booking]:
        """Return the booking or None; the caller decides how absence is rendered"""
        return await self.booking_repo.get_by_id(booking_id=booking_id)
