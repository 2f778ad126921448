from abc import ABC, abstractmethod

from movie_booking.service.booking.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    """Booking Ledger - write side (append-only)"""

    @abstractmethod
    async def create(self, *, booking: Booking) -> Booking:
        """
        Persist a confirmed booking and its per-seat rows in one transaction.

        Raises:
            SeatConflictError: a seat is already booked for the screening
            InternalError: persistence failed; nothing was written
        """
        pass
