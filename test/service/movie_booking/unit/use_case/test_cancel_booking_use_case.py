"""
Unit tests for CancelBookingUseCase

Cancellation deletes the booking; an unknown id is a NOT_FOUND result, not an error.
"""

from unittest.mock import Mock

import pytest

from src.service.movie_booking.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.movie_booking.app.dto import CancelBookingResult
from src.service.movie_booking.domain.entity.booking_entity import Booking
from test.constants import (
    CANCEL_NOT_FOUND_MESSAGE,
    CANCEL_SUCCESS_MESSAGE,
    TEST_MOVIE_ID,
    TEST_SHOW_TIME,
    TEST_USER_ID,
    UNKNOWN_ID,
)


@pytest.fixture
def existing_booking() -> Booking:
    booking = Booking.create(
        user_id=TEST_USER_ID,
        movie_id=TEST_MOVIE_ID,
        show_time=TEST_SHOW_TIME,
        seats=2,
        price_per_seat=10.0,
    )
    booking.id = 10
    return booking


@pytest.mark.unit
class TestCancelBookingUseCase:
    async def test_cancel_existing_booking_deletes_it(
        self, mock_booking_repo: Mock, existing_booking: Booking
    ) -> None:
        # Arrange
        mock_booking_repo.get_by_id.return_value = existing_booking
        use_case = CancelBookingUseCase(booking_repo=mock_booking_repo)

        # Act
        result = await use_case.cancel_booking(booking_id=10)

        # Assert
        assert result is CancelBookingResult.CANCELLED
        assert result.message == CANCEL_SUCCESS_MESSAGE
        mock_booking_repo.get_by_id.assert_awaited_once_with(booking_id=10)
        mock_booking_repo.delete.assert_awaited_once_with(booking=existing_booking)

    async def test_cancel_unknown_booking_reports_not_found(self, mock_booking_repo: Mock) -> None:
        # Arrange
        use_case = CancelBookingUseCase(booking_repo=mock_booking_repo)

        # Act
        result = await use_case.cancel_booking(booking_id=UNKNOWN_ID)

        # Assert
        assert result is CancelBookingResult.NOT_FOUND
        assert result.message == CANCEL_NOT_FOUND_MESSAGE
        mock_booking_repo.delete.assert_not_awaited()
