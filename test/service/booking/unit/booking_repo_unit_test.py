"""Error mapping of the ledger repositories, with the SQLAlchemy session mocked out."""

from contextlib import asynccontextmanager
import datetime as dt
import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from movie_booking.platform.exception.exceptions import InternalError, SeatConflictError
from movie_booking.service.booking.domain.entity.booking_entity import Booking
from movie_booking.service.booking.driven_adapter.model.booking_model import BookingModel
from movie_booking.service.booking.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)
from movie_booking.service.booking.driven_adapter.repo.booking_query_repo_impl import (
    BookingQueryRepoImpl,
)


pytestmark = pytest.mark.unit


def _booking() -> Booking:
    return Booking.create(
        name='Asha',
        phone_number='9876543210',
        seats=['A1', 'A2'],
        movie='Inception',
        payment_id='pay_1',
    )


def _session_factory(session: MagicMock):
    @asynccontextmanager
    async def factory():
        yield session

    return factory


class TestBookingCommandRepo:
    def setup_method(self):
        self.session = MagicMock()
        self.session.commit = AsyncMock()
        self.repo = BookingCommandRepoImpl(session_factory=_session_factory(self.session))

    @pytest.mark.asyncio
    async def test_create_adds_one_seat_row_per_seat(self):
        booking = _booking()

        assert await self.repo.create(booking=booking) == booking

        model = self.session.add.call_args.args[0]
        assert isinstance(model, BookingModel)
        assert str(model.id) == str(booking.id)
        assert [row.seat_label for row in model.booked_seats] == ['A1', 'A2']
        assert {row.movie for row in model.booked_seats} == {'Inception'}
        self.session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unique_violation_is_seat_conflict(self):
        self.session.commit.side_effect = IntegrityError('INSERT', {}, Exception('duplicate key'))

        with pytest.raises(SeatConflictError, match='already booked'):
            await self.repo.create(booking=_booking())

    @pytest.mark.asyncio
    async def test_other_database_errors_are_internal(self):
        self.session.commit.side_effect = OperationalError('INSERT', {}, Exception('db down'))

        with pytest.raises(InternalError, match='Failed to persist booking'):
            await self.repo.create(booking=_booking())

    @pytest.mark.asyncio
    async def test_missing_session_factory_fails_fast(self):
        with pytest.raises(RuntimeError):
            await BookingCommandRepoImpl().create(booking=_booking())


class TestBookingQueryRepo:
    @pytest.mark.asyncio
    async def test_get_by_id_maps_model_to_entity(self):
        booking = _booking()
        model = BookingModel(
            id=uuid.UUID(str(booking.id)),
            name=booking.name,
            phone_number=booking.phone_number,
            movie=booking.movie,
            seats=list(booking.seats),
            date=booking.date,
            time=booking.time,
            payment_id=booking.payment_id,
            created_at=dt.datetime(2025, 1, 10, tzinfo=dt.timezone.utc),
        )
        session = MagicMock()
        session.get = AsyncMock(return_value=model)
        repo = BookingQueryRepoImpl(session_factory=_session_factory(session))

        found = await repo.get_by_id(booking_id=booking.id)

        assert found is not None
        assert found.id == booking.id
        assert found.seats == ['A1', 'A2']

    @pytest.mark.asyncio
    async def test_get_by_id_returns_none_when_missing(self):
        session = MagicMock()
        session.get = AsyncMock(return_value=None)
        repo = BookingQueryRepoImpl(session_factory=_session_factory(session))

        assert await repo.get_by_id(booking_id=_booking().id) is None

    @pytest.mark.asyncio
    async def test_read_failure_under_booking_lock_is_internal(self):
        # Given: the ledger is unreachable
        session = MagicMock()
        session.execute = AsyncMock(side_effect=OperationalError('SELECT', {}, Exception('db down')))
        repo = BookingQueryRepoImpl(session_factory=_session_factory(session))

        # When / Then
        with pytest.raises(InternalError, match='Failed to read bookings'):
            await repo.list_booked_seats(movie='Inception')

    @pytest.mark.asyncio
    async def test_list_bookings_failure_is_internal(self):
        session = MagicMock()
        session.execute = AsyncMock(side_effect=OperationalError('SELECT', {}, Exception('db down')))
        repo = BookingQueryRepoImpl(session_factory=_session_factory(session))

        with pytest.raises(InternalError):
            await repo.list_bookings()
