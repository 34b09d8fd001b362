import pytest

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.logging.loguru_io_utils import MASK, mask_sensitive, truncate_content


@pytest.fixture
def captured_logs():
    messages: list[str] = []
    sink_id = Logger.base.add(lambda message: messages.append(str(message)), level='DEBUG')
    yield messages
    Logger.base.remove(sink_id)


@pytest.mark.unit
class TestMaskSensitive:
    def test_masks_value_after_sensitive_keyword(self) -> None:
        assert mask_sensitive("password='hunter2'") == f"password='{MASK}'"
        assert mask_sensitive('api_token: abc123') == f'api_token: {MASK}'

    def test_leaves_other_text_alone(self) -> None:
        assert mask_sensitive('seats=3, movie_id=5') == 'seats=3, movie_id=5'

    def test_non_string_without_secrets_is_returned_unchanged(self) -> None:
        data = {'seats': 3}
        assert mask_sensitive(data) is data

    def test_truncate_long_content(self) -> None:
        truncated = truncate_content('x' * 1500)

        assert truncated.startswith('x' * 1000)
        assert truncated.endswith('(truncated 500 chars)')


@pytest.mark.unit
class TestLoggerIo:
    async def test_logs_args_and_return_value(self, captured_logs: list[str]) -> None:
        @Logger.io
        async def price(*, seats: int, price_per_seat: float) -> float:
            return seats * price_per_seat

        assert await price(seats=3, price_per_seat=10.0) == 30.0
        joined = '\n'.join(captured_logs)
        assert "'seats': 3" in joined
        assert 'return: 30.0' in joined

    def test_masks_sensitive_kwargs(self, captured_logs: list[str]) -> None:
        @Logger.io
        def login(*, email: str, password: str) -> bool:
            return True

        login(email='a@b.io', password='hunter2')

        joined = '\n'.join(captured_logs)
        assert 'hunter2' not in joined
        assert MASK in joined

    async def test_reraises_and_logs_once(self, captured_logs: list[str]) -> None:
        @Logger.io
        async def inner() -> None:
            raise NotFoundError('Movie not found')

        @Logger.io
        async def outer() -> None:
            await inner()

        with pytest.raises(NotFoundError) as exc_info:
            await outer()

        assert getattr(exc_info.value, '_has_logged', False) is True
        assert sum('NotFoundError: Movie not found' in m for m in captured_logs) == 1

    def test_reraise_false_swallows_into_none(self) -> None:
        @Logger.io(reraise=False)
        def explode() -> int:
            raise ValueError('boom')

        assert explode() is None
