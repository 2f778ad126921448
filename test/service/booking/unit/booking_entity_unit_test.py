import datetime as dt

import pytest

from movie_booking.platform.exception.exceptions import DomainError
from movie_booking.service.booking.domain.entity.booking_entity import Booking


pytestmark = pytest.mark.unit

NOW = dt.datetime(2025, 1, 10, 18, 30, 15, 123456, tzinfo=dt.timezone.utc)


def _create(**overrides) -> Booking:
    fields = {
        'name': 'Asha',
        'phone_number': '9876543210',
        'seats': ['A1', 'A2'],
        'movie': 'Inception',
        'payment_id': 'pay_1',
        'now': NOW,
    }
    return Booking.create(**(fields | overrides))


class TestBookingCreate:
    def test_stamps_date_and_time_from_now(self):
        booking = _create()

        assert booking.date == dt.date(2025, 1, 10)
        assert booking.time == dt.time(18, 30, 15)  # second precision
        assert booking.created_at == NOW
        assert booking.seats == ['A1', 'A2']

    def test_ids_are_unique_uuid7(self):
        first, second = _create(), _create()

        assert first.id != second.id
        assert first.id.version == 7

    @pytest.mark.parametrize(
        'overrides',
        [
            {'seats': []},
            {'seats': ['A1', 'A1']},
            {'seats': ['A1', '']},
            {'movie': ''},
            {'payment_id': ''},
        ],
    )
    def test_rejects_invalid_input(self, overrides):
        with pytest.raises(DomainError):
            _create(**overrides)

    def test_is_immutable(self):
        booking = _create()
        with pytest.raises(AttributeError):
            booking.movie = 'Tenet'  # type: ignore[misc]


class TestReceiptText:
    def test_lists_booking_details(self):
        text = _create().receipt_text()

        assert text == (
            'Name: Asha\n'
            'Phone: 9876543210\n'
            'Seats: A1, A2\n'
            'Movie: Inception\n'
            'Date: 2025-01-10'
        )
