"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.movie_booking.driven_adapter.model.booking_model import BookingModel
from src.service.movie_booking.driven_adapter.model.movie_model import MovieModel
from src.service.movie_booking.driven_adapter.model.user_model import UserModel

__all__ = [
    'BookingModel',
    'MovieModel',
    'UserModel',
]
