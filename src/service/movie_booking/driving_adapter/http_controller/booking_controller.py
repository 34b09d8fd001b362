from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from opentelemetry import trace

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.movie_booking.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.movie_booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.movie_booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.movie_booking.app.query.list_user_bookings_use_case import (
    ListUserBookingsUseCase,
)
from src.service.movie_booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingRequest,
    BookingResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.post('', status_code=status.HTTP_200_OK)
@Logger.io
async def create_booking(
    request: BookingRequest,
    use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingResponse:
    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('user_id', request.user_id)
        span.set_attribute('movie_id', request.movie_id)

        booking = await use_case.create_booking(
            user_id=request.user_id,
            movie_id=request.movie_id,
            show_time=request.show_time,
            seats=request.seats,
        )
        return BookingResponse.from_entity(booking)


@router.get('/user/{user_id}')
@Logger.io
async def list_user_bookings(
    user_id: int,
    use_case: ListUserBookingsUseCase = Depends(ListUserBookingsUseCase.depends),
) -> List[BookingResponse]:
    bookings = await use_case.list_user_bookings(user_id=user_id)
    return [BookingResponse.from_entity(booking) for booking in bookings]


@router.get('/{booking_id}')
@Logger.io
async def get_booking(
    booking_id: int,
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingResponse:
    booking = await use_case.get_booking(booking_id=booking_id)
    if not booking:
        raise NotFoundError('Booking not found')
    return BookingResponse.from_entity(booking)


@router.delete('/{booking_id}', response_class=PlainTextResponse)
@Logger.io
async def cancel_booking(
    booking_id: int,
    use_case: CancelBookingUseCase = Depends(CancelBookingUseCase.depends),
) -> PlainTextResponse:
    # Both outcomes are 200; the body tells them apart
    result = await use_case.cancel_booking(booking_id=booking_id)
    return PlainTextResponse(content=result.message, status_code=status.HTTP_200_OK)
