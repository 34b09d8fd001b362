from typing import Optional

import attrs


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValueError(f'Movie {attribute.name} cannot be empty')


def _validate_non_negative(instance: object, attribute: attrs.Attribute, value: float) -> None:
    if value < 0:
        raise ValueError(f'Movie {attribute.name} cannot be negative')


@attrs.define
class MovieEntity:
    title: str = attrs.field(validator=_validate_non_empty_string)
    price_per_seat: float = attrs.field(converter=float, validator=_validate_non_negative)
    genre: Optional[str] = None
    duration_minutes: Optional[int] = None
    id: Optional[int] = None
