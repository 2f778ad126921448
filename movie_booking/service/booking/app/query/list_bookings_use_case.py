from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from movie_booking.platform.config.di import Container
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from movie_booking.service.booking.domain.entity.booking_entity import Booking


class ListBookingsUseCase:
    def __init__(self, booking_query_repo: IBookingQueryRepo):
        self.booking_query_repo = booking_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
    ) -> Self:
        return cls(booking_query_repo=booking_query_repo)

    @Logger.io
    async def list_bookings(self, movie: Optional[str] = None) -> List[Booking]:
        return await self.booking_query_repo.list_bookings(movie=movie)
