"""
Booking Command Repository Implementation

Appends confirmed bookings to the ledger (PostgreSQL).
"""

from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable
import uuid

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from movie_booking.platform.exception.exceptions import InternalError, SeatConflictError
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from movie_booking.service.booking.domain.entity.booking_entity import Booking
from movie_booking.service.booking.driven_adapter.model.booking_model import (
    BookedSeatModel,
    BookingModel,
)


class BookingCommandRepoImpl(IBookingCommandRepo):
    """
    Booking Command Repository

    Writes the booking row and one booked_seat row per seat in a single
    transaction. The (movie, seat_label) unique key rejects a second booking
    of the same seat even across processes.
    """

    def __init__(
        self, session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None
    ) -> None:
        self.session_factory = session_factory

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        if self.session_factory is None:
            raise RuntimeError('No session_factory available')
        async with self.session_factory() as session:
            yield session

    @staticmethod
    def _to_model(booking: Booking) -> BookingModel:
        booking_uuid = uuid.UUID(str(booking.id))  # uuid_utils.UUID -> stdlib for asyncpg
        return BookingModel(
            id=booking_uuid,
            name=booking.name,
            phone_number=booking.phone_number,
            movie=booking.movie,
            seats=list(booking.seats),
            date=booking.date,
            time=booking.time,
            payment_id=booking.payment_id,
            created_at=booking.created_at,
            booked_seats=[
                BookedSeatModel(booking_id=booking_uuid, movie=booking.movie, seat_label=seat)
                for seat in booking.seats
            ],
        )

    @Logger.io
    async def create(self, *, booking: Booking) -> Booking:
        try:
            async with self._get_session() as session:
                session.add(self._to_model(booking))
                await session.commit()
        except IntegrityError as e:
            Logger.base.warning(
                f'⚠️ [LEDGER] Seat already booked for {booking.movie}: {booking.seats}'
            )
            raise SeatConflictError('Some seats are already booked', seats=booking.seats) from e
        except SQLAlchemyError as e:
            Logger.base.error(f'❌ [LEDGER] Failed to persist booking {booking.id}: {e}')
            raise InternalError('Failed to persist booking') from e

        Logger.base.info(
            f'💾 [LEDGER] Booking {booking.id} saved: {booking.movie} {booking.seats}'
        )
        return booking
