import pytest

from movie_booking.platform.exception.exceptions import DomainError
from movie_booking.platform.logging.loguru_io import Logger, LoguruIO
from movie_booking.platform.logging.loguru_io_config import access_log_level
from movie_booking.platform.logging.loguru_io_utils import (
    MASK,
    mask_sensitive,
    truncate_content,
)


pytestmark = pytest.mark.unit


class TestMaskSensitive:
    def test_masks_quoted_pairs_in_repr(self):
        text = "PaymentProof(razorpay_payment_id='pay_1', razorpay_signature='abc123')"

        masked = mask_sensitive(text)

        assert 'abc123' not in masked
        assert f"razorpay_signature='{MASK}'" in masked
        assert "razorpay_payment_id='pay_1'" in masked

    def test_returns_value_untouched_when_nothing_to_mask(self):
        data = {'movie': 'Inception'}
        assert mask_sensitive(data) is data

    def test_masks_sensitive_dict_keys(self):
        io = LoguruIO(Logger.base)

        masked = io.mask_sensitive({'password': 'hunter2', 'email': 'a@b.c'})

        assert masked == {'password': MASK, 'email': 'a@b.c'}


class TestTruncateContent:
    def test_long_strings_are_cut(self):
        result = truncate_content('x' * 600, max_length=500)
        assert result.startswith('x' * 500)
        assert result.endswith('...(+100 chars)')

    def test_short_strings_and_non_strings_pass_through(self):
        assert truncate_content('short') == 'short'
        assert truncate_content(12345) == 12345


class TestLoggerIoDecorator:
    def test_sync_function_returns_value(self):
        @Logger.io
        def add(a: int, b: int) -> int:
            return a + b

        assert add(1, 2) == 3

    @pytest.mark.asyncio
    async def test_async_function_reraises(self):
        @Logger.io
        async def boom() -> None:
            raise DomainError('bad input')

        with pytest.raises(DomainError, match='bad input'):
            await boom()

    def test_reraise_false_swallows_and_returns_none(self):
        @Logger.io(reraise=False)
        def boom() -> int:
            raise RuntimeError('boom')

        assert boom() is None

    def test_preserves_function_metadata(self):
        @Logger.io
        def documented() -> None:
            """Docstring survives"""

        assert documented.__name__ == 'documented'
        assert documented.__doc__ == 'Docstring survives'


class TestAccessLogLevel:
    @pytest.mark.parametrize(
        ('status_code', 'level'),
        [(200, 'SUCCESS'), (307, 'WARNING'), (400, 'ERROR'), (502, 'CRITICAL'), (101, 'INFO')],
    )
    def test_level_follows_http_status(self, status_code, level):
        line = f'127.0.0.1:52144 - "POST /api/bookings/block-seats HTTP/1.1" {status_code}'
        assert access_log_level(line) == level

    def test_other_messages_are_ignored(self):
        assert access_log_level('Application startup complete.') is None


class TestLoggerIoReporting:
    def test_slow_call_warns(self):
        messages: list[str] = []
        sink_id = Logger.base.add(messages.append, level='WARNING', format='{message}')
        try:

            @Logger.io(slow_call_seconds=0)
            def quick() -> str:
                return 'done'

            assert quick() == 'done'
        finally:
            Logger.base.remove(sink_id)

        assert any('slow call' in message for message in messages)

    def test_exception_is_marked_logged_once(self):
        @Logger.io
        def inner() -> None:
            raise DomainError('nested')

        @Logger.io
        def outer() -> None:
            inner()

        with pytest.raises(DomainError) as exc_info:
            outer()

        assert exc_info.value._has_logged is True
