from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.movie_booking.app.command.create_user_use_case import CreateUserUseCase
from src.service.movie_booking.app.query.get_user_use_case import GetUserUseCase
from src.service.movie_booking.driving_adapter.http_controller.schema.user_schema import (
    UserCreateRequest,
    UserResponse,
)


router = APIRouter()


@router.post('', response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_user(
    request: UserCreateRequest,
    use_case: CreateUserUseCase = Depends(CreateUserUseCase.depends),
) -> UserResponse:
    user = await use_case.create_user(name=request.name, email=str(request.email))
    return UserResponse.from_entity(user)


@router.get('/{user_id}', response_model=UserResponse)
@Logger.io
async def get_user(
    user_id: int,
    use_case: GetUserUseCase = Depends(GetUserUseCase.depends),
) -> UserResponse:
    user = await use_case.get_user(user_id=user_id)
    return UserResponse.from_entity(user)
