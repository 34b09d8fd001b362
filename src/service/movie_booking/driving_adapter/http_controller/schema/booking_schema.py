from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.service.movie_booking.domain.entity.booking_entity import Booking


class BookingRequest(BaseModel):
    """Creation input; only its shape is validated"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            'example': {
                'userId': 1,
                'movieId': 5,
                'showTime': '2025-01-10T19:30:00',
                'seats': 3,
            }
        },
    )

    user_id: int
    movie_id: int
    show_time: datetime
    seats: int
    # Accepted for compatibility; new bookings are always Booked
    status: Optional[str] = None


class BookingResponse(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            'example': {
                'id': 1,
                'userId': 1,
                'movieId': 5,
                'bookingTime': '2025-01-08T10:30:00Z',
                'showTime': '2025-01-10T19:30:00',
                'seats': 3,
                'totalPrice': 30.0,
                'status': 'Booked',
            }
        },
    )

    id: int
    user_id: int
    movie_id: int
    booking_time: datetime
    show_time: datetime
    seats: int
    total_price: float
    status: str

    @classmethod
    def from_entity(cls, booking: Booking) -> 'BookingResponse':
        if booking.id is None:
            raise ValueError('Booking ID should not be None after persistence.')
        return cls(
            id=booking.id,
            user_id=booking.user_id,
            movie_id=booking.movie_id,
            booking_time=booking.booking_time,
            show_time=booking.show_time,
            seats=booking.seats,
            total_price=booking.total_price,
            status=booking.status.value,
        )
