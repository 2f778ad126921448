import datetime as dt
from typing import List, Optional

import attrs
from uuid_utils import UUID
import uuid_utils

from movie_booking.platform.exception.exceptions import DomainError
from movie_booking.platform.logging.loguru_io import Logger


@attrs.define(frozen=True)
class Booking:
    """Confirmed booking. Append-only: never mutated once persisted."""

    id: UUID
    name: str
    phone_number: str
    seats: List[str]
    movie: str
    date: dt.date
    time: dt.time
    payment_id: str
    created_at: Optional[dt.datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        name: str,
        phone_number: str,
        seats: List[str],
        movie: str,
        payment_id: str,
        now: Optional[dt.datetime] = None,
    ) -> 'Booking':
        if not movie:
            raise DomainError('movie is required')
        if not payment_id:
            raise DomainError('payment id is required')
        if not seats:
            raise DomainError('At least one seat is required for booking')
        if len(set(seats)) != len(seats):
            raise DomainError('Duplicate seat labels in booking')
        if any(not seat for seat in seats):
            raise DomainError('Seat labels must not be empty')

        now = now or dt.datetime.now(dt.timezone.utc)
        return cls(
            id=uuid_utils.uuid7(),
            name=name,
            phone_number=phone_number,
            seats=list(seats),
            movie=movie,
            date=now.date(),
            time=now.time().replace(microsecond=0),
            payment_id=payment_id,
            created_at=now,
        )

    def receipt_text(self) -> str:
        """Plain-text booking details encoded in the QR receipt"""
        return (
            f'Name: {self.name}\n'
            f'Phone: {self.phone_number}\n'
            f'Seats: {", ".join(self.seats)}\n'
            f'Movie: {self.movie}\n'
            f'Date: {self.date.isoformat()}'
        )
