"""
Test Configuration and Fixtures

- Environment setup that must happen before application modules are imported
- In-memory repositories wired into the DI container for API tests
- Seeded user/movie fixtures
"""

# =============================================================================
# Environment setup MUST happen before any application import: settings and
# the loguru sinks are configured at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('SERVICE_NAME', 'movie-booking-test')
    os.environ.setdefault('POSTGRES_DB', 'movie_booking_test_db')


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402

from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402
from src.service.movie_booking.domain.entity.movie_entity import MovieEntity  # noqa: E402
from src.service.movie_booking.domain.entity.user_entity import UserEntity  # noqa: E402
from test.constants import (  # noqa: E402
    ANOTHER_USER_EMAIL,
    ANOTHER_USER_ID,
    ANOTHER_USER_NAME,
    TEST_MOVIE_ID,
    TEST_MOVIE_PRICE_PER_SEAT,
    TEST_MOVIE_TITLE,
    TEST_USER_EMAIL,
    TEST_USER_ID,
    TEST_USER_NAME,
)
from test.fakes import InMemoryBookingRepo, InMemoryMovieRepo, InMemoryUserRepo  # noqa: E402


@pytest.fixture
def booking_repo() -> InMemoryBookingRepo:
    return InMemoryBookingRepo()


@pytest.fixture
def movie_repo() -> InMemoryMovieRepo:
    repo = InMemoryMovieRepo()
    repo.add(
        MovieEntity(
            id=TEST_MOVIE_ID,
            title=TEST_MOVIE_TITLE,
            price_per_seat=TEST_MOVIE_PRICE_PER_SEAT,
        )
    )
    return repo


@pytest.fixture
def user_repo() -> InMemoryUserRepo:
    repo = InMemoryUserRepo()
    repo.add(UserEntity(id=TEST_USER_ID, name=TEST_USER_NAME, email=TEST_USER_EMAIL))
    repo.add(UserEntity(id=ANOTHER_USER_ID, name=ANOTHER_USER_NAME, email=ANOTHER_USER_EMAIL))
    return repo


@pytest.fixture
def client(
    booking_repo: InMemoryBookingRepo,
    movie_repo: InMemoryMovieRepo,
    user_repo: InMemoryUserRepo,
) -> Generator[TestClient, None, None]:
    from test.test_main import app

    container.booking_repo.override(providers.Object(booking_repo))
    container.movie_query_repo.override(providers.Object(movie_repo))
    container.movie_command_repo.override(providers.Object(movie_repo))
    container.user_query_repo.override(providers.Object(user_repo))
    container.user_command_repo.override(providers.Object(user_repo))

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    container.reset_override()
