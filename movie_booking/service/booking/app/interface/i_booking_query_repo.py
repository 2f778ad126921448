from abc import ABC, abstractmethod
from typing import List, Optional

from uuid_utils import UUID

from movie_booking.service.booking.domain.entity.booking_entity import Booking


class IBookingQueryRepo(ABC):
    """Booking Ledger - read side"""

    @abstractmethod
    async def list_booked_seats(self, *, movie: str) -> List[str]:
        """Union of seat labels over all bookings of the screening"""
        pass

    @abstractmethod
    async def list_bookings(self, *, movie: Optional[str] = None) -> List[Booking]:
        pass

    @abstractmethod
    async def get_by_id(self, *, booking_id: UUID) -> Optional[Booking]:
        pass
