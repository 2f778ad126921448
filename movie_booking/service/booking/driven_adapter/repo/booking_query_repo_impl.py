from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, List, Optional
import uuid

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_utils import UUID

from movie_booking.platform.exception.exceptions import InternalError
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from movie_booking.service.booking.domain.entity.booking_entity import Booking
from movie_booking.service.booking.driven_adapter.model.booking_model import (
    BookedSeatModel,
    BookingModel,
)


class BookingQueryRepoImpl(IBookingQueryRepo):
    def __init__(
        self, session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None
    ) -> None:
        self.session_factory = session_factory

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        if self.session_factory is None:
            raise RuntimeError('No session_factory available')
        try:
            async with self.session_factory() as session:
                yield session
        except SQLAlchemyError as e:
            Logger.base.error(f'❌ [LEDGER] Read failed: {e}')
            raise InternalError('Failed to read bookings') from e

    @staticmethod
    def _to_entity(db_booking: BookingModel) -> Booking:
        """
        Convert BookingModel to Booking entity

        Note: as_uuid=True returns stdlib uuid.UUID; the entity carries uuid_utils.UUID.
        """
        return Booking(
            id=UUID(str(db_booking.id)),
            name=db_booking.name,
            phone_number=db_booking.phone_number,
            seats=list(db_booking.seats or []),
            movie=db_booking.movie,
            date=db_booking.date,
            time=db_booking.time,
            payment_id=db_booking.payment_id,
            created_at=db_booking.created_at,
        )

    @Logger.io
    async def list_booked_seats(self, *, movie: str) -> List[str]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookedSeatModel.seat_label)
                .where(BookedSeatModel.movie == movie)
                .order_by(BookedSeatModel.id)
            )
            return list(result.scalars().all())

    @Logger.io
    async def list_bookings(self, *, movie: Optional[str] = None) -> List[Booking]:
        stmt = select(BookingModel).order_by(BookingModel.created_at, BookingModel.id)
        if movie is not None:
            stmt = stmt.where(BookingModel.movie == movie)

        async with self._get_session() as session:
            result = await session.execute(stmt)
            return [self._to_entity(row) for row in result.scalars().all()]

    @Logger.io
    async def get_by_id(self, *, booking_id: UUID) -> Optional[Booking]:
        async with self._get_session() as session:
            db_booking = await session.get(BookingModel, uuid.UUID(str(booking_id)))
            return self._to_entity(db_booking) if db_booking else None
