from enum import Enum


class CancelBookingResult(Enum):
    """Outcome of a cancellation; absence is a normal result, not an error"""

    CANCELLED = 'Booking canceled successfully.'
    NOT_FOUND = 'Booking not found.'

    @property
    def message(self) -> str:
        return self.value
