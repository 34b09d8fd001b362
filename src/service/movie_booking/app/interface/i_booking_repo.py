from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.movie_booking.domain.entity.booking_entity import Booking


class IBookingRepo(ABC):
    """
    Persistence port for Booking records.

    No transactional guarantees beyond what the underlying store gives a
    single-row insert/delete.
    """

    @abstractmethod
    async def save(self, *, booking: Booking) -> Booking:
        """
        Persist a booking

        Args:
            booking: Booking entity; id is None for a new record

        Returns:
            Stored booking including the store-assigned id
        """
        pass

    @abstractmethod
    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        pass

    @abstractmethod
    async def list_by_user_id(self, *, user_id: int) -> List[Booking]:
        """All bookings of a user, in insertion order"""
        pass

    @abstractmethod
    async def delete(self, *, booking: Booking) -> None:
        """Remove the booking permanently (caller checks existence first)"""
        pass
