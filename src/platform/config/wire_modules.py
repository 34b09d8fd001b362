"""
Wire Modules Configuration

Modules whose `depends` classmethods resolve collaborators through Provide[...].
Shared between production and test apps.
"""

from types import ModuleType

from src.service.movie_booking.app.command import (
    cancel_booking_use_case,
    create_booking_use_case,
    create_movie_use_case,
    create_user_use_case,
)
from src.service.movie_booking.app.query import (
    get_booking_use_case,
    get_movie_use_case,
    get_user_use_case,
    list_user_bookings_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    create_booking_use_case,
    cancel_booking_use_case,
    get_booking_use_case,
    list_user_bookings_use_case,
    create_movie_use_case,
    get_movie_use_case,
    create_user_use_case,
    get_user_use_case,
]
