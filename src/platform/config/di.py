"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.database.orm_db_setting import Database
from src.service.movie_booking.driven_adapter.repo.booking_repo_impl import BookingRepoImpl
from src.service.movie_booking.driven_adapter.repo.movie_repo_impl import (
    MovieCommandRepoImpl,
    MovieQueryRepoImpl,
)
from src.service.movie_booking.driven_adapter.repo.user_repo_impl import (
    UserCommandRepoImpl,
    UserQueryRepoImpl,
)


class Container(containers.DeclarativeContainer):
    # Database
    database = providers.Singleton(Database)

    # Repositories (stateless - open a session per call)
    booking_repo = providers.Singleton(BookingRepoImpl, session_factory=database.provided.session)
    movie_query_repo = providers.Singleton(
        MovieQueryRepoImpl, session_factory=database.provided.session
    )
    movie_command_repo = providers.Singleton(
        MovieCommandRepoImpl, session_factory=database.provided.session
    )
    user_query_repo = providers.Singleton(
        UserQueryRepoImpl, session_factory=database.provided.session
    )
    user_command_repo = providers.Singleton(
        UserCommandRepoImpl, session_factory=database.provided.session
    )


container = Container()
