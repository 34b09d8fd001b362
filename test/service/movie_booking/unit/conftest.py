"""
Unit test fixtures for the movie booking service.

Collaborators are AsyncMocks; no database or HTTP client involved.
"""

from unittest.mock import AsyncMock, Mock

import pytest

from src.service.movie_booking.domain.entity.movie_entity import MovieEntity
from src.service.movie_booking.domain.entity.user_entity import UserEntity
from test.constants import (
    TEST_MOVIE_ID,
    TEST_MOVIE_PRICE_PER_SEAT,
    TEST_MOVIE_TITLE,
    TEST_USER_EMAIL,
    TEST_USER_ID,
    TEST_USER_NAME,
)


@pytest.fixture
def test_user() -> UserEntity:
    return UserEntity(id=TEST_USER_ID, name=TEST_USER_NAME, email=TEST_USER_EMAIL)


@pytest.fixture
def test_movie() -> MovieEntity:
    return MovieEntity(
        id=TEST_MOVIE_ID, title=TEST_MOVIE_TITLE, price_per_seat=TEST_MOVIE_PRICE_PER_SEAT
    )


@pytest.fixture
def mock_booking_repo() -> Mock:
    repo = AsyncMock()
    repo.save = AsyncMock()
    repo.get_by_id = AsyncMock(return_value=None)
    repo.list_by_user_id = AsyncMock(return_value=[])
    repo.delete = AsyncMock()
    return repo


@pytest.fixture
def mock_user_query_repo(test_user: UserEntity) -> Mock:
    repo = AsyncMock()
    repo.get_by_id = AsyncMock(return_value=test_user)
    repo.exists_by_email = AsyncMock(return_value=False)
    return repo


@pytest.fixture
def mock_movie_query_repo(test_movie: MovieEntity) -> Mock:
    repo = AsyncMock()
    repo.get_by_id = AsyncMock(return_value=test_movie)
    return repo
