from unittest.mock import Mock

import pytest

from src.service.movie_booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.movie_booking.app.query.list_user_bookings_use_case import (
    ListUserBookingsUseCase,
)
from src.service.movie_booking.domain.entity.booking_entity import Booking
from test.constants import ANOTHER_USER_ID, TEST_MOVIE_ID, TEST_SHOW_TIME, TEST_USER_ID


def _booking(booking_id: int, user_id: int = TEST_USER_ID) -> Booking:
    booking = Booking.create(
        user_id=user_id,
        movie_id=TEST_MOVIE_ID,
        show_time=TEST_SHOW_TIME,
        seats=1,
        price_per_seat=10.0,
    )
    booking.id = booking_id
    return booking


@pytest.mark.unit
class TestGetBookingUseCase:
    async def test_returns_booking_from_repo(self, mock_booking_repo: Mock) -> None:
        booking = _booking(7)
        mock_booking_repo.get_by_id.return_value = booking

        result = await GetBookingUseCase(booking_repo=mock_booking_repo).get_booking(booking_id=7)

        assert result == booking
        mock_booking_repo.get_by_id.assert_awaited_once_with(booking_id=7)

    async def test_returns_none_when_absent(self, mock_booking_repo: Mock) -> None:
        result = await GetBookingUseCase(booking_repo=mock_booking_repo).get_booking(booking_id=1)

        assert result is None


@pytest.mark.unit
class TestListUserBookingsUseCase:
    async def test_passes_through_repo_result(self, mock_booking_repo: Mock) -> None:
        bookings = [_booking(1), _booking(2)]
        mock_booking_repo.list_by_user_id.return_value = bookings

        result = await ListUserBookingsUseCase(booking_repo=mock_booking_repo).list_user_bookings(
            user_id=TEST_USER_ID
        )

        assert result == bookings
        mock_booking_repo.list_by_user_id.assert_awaited_once_with(user_id=TEST_USER_ID)

    async def test_empty_for_user_without_bookings(self, mock_booking_repo: Mock) -> None:
        result = await ListUserBookingsUseCase(booking_repo=mock_booking_repo).list_user_bookings(
            user_id=ANOTHER_USER_ID
        )

        assert result == []
