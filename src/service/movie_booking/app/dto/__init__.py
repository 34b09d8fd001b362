from src.service.movie_booking.app.dto.cancel_booking_result import CancelBookingResult

__all__ = ['CancelBookingResult']
