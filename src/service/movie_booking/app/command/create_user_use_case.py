from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ConflictError, DomainError
from src.platform.logging.loguru_io import Logger
from src.service.movie_booking.app.interface.i_user_repo import IUserCommandRepo, IUserQueryRepo
from src.service.movie_booking.domain.entity.user_entity import UserEntity


class CreateUserUseCase:
    def __init__(
        self,
        *,
        user_command_repo: IUserCommandRepo,
        user_query_repo: IUserQueryRepo,
    ) -> None:
        self.user_command_repo = user_command_repo
        self.user_query_repo = user_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
    ) -> Self:
        return cls(user_command_repo=user_command_repo, user_query_repo=user_query_repo)

    @Logger.io
    async def create_user(self, *, name: str, email: str) -> UserEntity:
        if not name.strip():
            raise DomainError('User name cannot be empty')

        if await self.user_query_repo.exists_by_email(email=email):
            raise ConflictError('Email already registered')

        return await self.user_command_repo.create(user=UserEntity(name=name, email=email))
