from datetime import datetime, timezone
from enum import StrEnum
from typing import Optional

import attrs

from src.platform.logging.loguru_io import Logger


class BookingStatus(StrEnum):
    BOOKED = 'Booked'


@attrs.define
class Booking:
    user_id: int
    movie_id: int
    show_time: datetime
    seats: int
    total_price: float
    booking_time: datetime
    status: BookingStatus = BookingStatus.BOOKED
    id: Optional[int] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        user_id: int,
        movie_id: int,
        show_time: datetime,
        seats: int,
        price_per_seat: float,
    ) -> 'Booking':
        """
        Build a new, not yet persisted booking.

        The total price is frozen here; later price changes on the movie do
        not touch existing bookings. Seat count is taken as given.
        """
        return cls(
            user_id=user_id,
            movie_id=movie_id,
            show_time=show_time,
            seats=seats,
            total_price=seats * price_per_seat,
            booking_time=datetime.now(timezone.utc),
            status=BookingStatus.BOOKED,
        )
