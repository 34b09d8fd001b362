from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import is_storable_id
from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.movie_booking.app.interface.i_user_repo import IUserCommandRepo, IUserQueryRepo
from src.service.movie_booking.domain.entity.user_entity import UserEntity
from src.service.movie_booking.driven_adapter.model.user_model import UserModel


def _model_to_entity(user_model: UserModel) -> UserEntity:
    return UserEntity(id=user_model.id, name=user_model.name, email=user_model.email)


class UserQueryRepoImpl(IUserQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, user_id: int) -> Optional[UserEntity]:
        if not is_storable_id(user_id):
            return None
        async with self.session_factory() as session:
            result = await session.execute(select(UserModel).where(UserModel.id == user_id))
            user_model = result.scalar_one_or_none()

            if not user_model:
                return None

            return _model_to_entity(user_model)

    @Logger.io
    async def exists_by_email(self, *, email: str) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(select(UserModel.id).where(UserModel.email == email))
            return result.scalar_one_or_none() is not None


class UserCommandRepoImpl(IUserCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, user: UserEntity) -> UserEntity:
        async with self.session_factory() as session:
            user_model = UserModel(name=user.name, email=user.email)

            session.add(user_model)
            try:
                await session.commit()
            except IntegrityError as e:
                # Unique index on email; a concurrent insert won the race
                await session.rollback()
                raise ConflictError('Email already registered') from e
            await session.refresh(user_model)

            return _model_to_entity(user_model)
