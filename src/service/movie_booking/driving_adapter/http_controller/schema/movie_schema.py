from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.service.movie_booking.domain.entity.movie_entity import MovieEntity


class MovieCreateRequest(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            'example': {
                'title': 'Inception',
                'genre': 'Sci-Fi',
                'durationMinutes': 148,
                'pricePerSeat': 10.0,
            }
        },
    )

    title: str
    price_per_seat: float
    genre: Optional[str] = None
    duration_minutes: Optional[int] = None


class MovieResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    price_per_seat: float
    genre: Optional[str] = None
    duration_minutes: Optional[int] = None

    @classmethod
    def from_entity(cls, movie: MovieEntity) -> 'MovieResponse':
        if movie.id is None:
            raise ValueError('Movie ID should not be None after persistence.')
        return cls(
            id=movie.id,
            title=movie.title,
            price_per_seat=movie.price_per_seat,
            genre=movie.genre,
            duration_minutes=movie.duration_minutes,
        )
