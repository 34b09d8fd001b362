from pydantic import BaseModel, ConfigDict, EmailStr

from src.service.movie_booking.domain.entity.user_entity import UserEntity


class UserCreateRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={'example': {'name': 'John Doe', 'email': 'john@example.com'}}
    )

    name: str
    email: EmailStr


class UserResponse(BaseModel):
    id: int
    name: str
    email: str

    @classmethod
    def from_entity(cls, user: UserEntity) -> 'UserResponse':
        if user.id is None:
            raise ValueError('User ID should not be None after persistence.')
        return cls(id=user.id, name=user.name, email=user.email)
