from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from movie_booking.platform.config.di import Container
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.booking.app.dto import SeatStatus
from movie_booking.service.booking.app.interface import IBookingQueryRepo, ISeatHoldStore


class GetSeatStatusUseCase:
    def __init__(
        self, *, booking_query_repo: IBookingQueryRepo, seat_hold_store: ISeatHoldStore
    ) -> None:
        self.booking_query_repo = booking_query_repo
        self.seat_hold_store = seat_hold_store

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
        seat_hold_store: ISeatHoldStore = Depends(Provide[Container.seat_hold_store]),
    ) -> Self:
        return cls(booking_query_repo=booking_query_repo, seat_hold_store=seat_hold_store)

    @Logger.io
    async def execute(self, *, movie: str) -> SeatStatus:
        booked = await self.booking_query_repo.list_booked_seats(movie=movie)
        held = await self.seat_hold_store.get_held_seats(movie=movie)
        return SeatStatus(booked=booked, held=held)
