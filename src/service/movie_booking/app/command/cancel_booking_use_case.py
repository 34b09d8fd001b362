from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import booking_metrics
from src.service.movie_booking.app.dto import CancelBookingResult
from src.service.movie_booking.app.interface.i_booking_repo import IBookingRepo


class CancelBookingUseCase:
    """
    Cancel a booking by deleting it.

    Cancellation is a hard delete: no cancelled record is kept. An unknown id
    is reported as CancelBookingResult.NOT_FOUND rather than raised.
    """

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
    async def cancel_booking(self, *, booking_id: int) -> CancelBookingResult:
        booking = await self.booking_repo.get_by_id(booking_id=booking_id)
        if not booking:
            booking_metrics.record_cancellation(result='not_found')
            return CancelBookingResult.NOT_FOUND

        await self.booking_repo.delete(booking=booking)
        booking_metrics.record_cancellation(result='cancelled')
        Logger.base.info(f'🗑️ [CANCEL] Booking {booking_id} deleted')

        return CancelBookingResult.CANCELLED
