from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from movie_booking.platform.config.di import Container
from movie_booking.platform.exception.exceptions import SeatConflictError
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.platform.metrics.booking_metrics import metrics
from movie_booking.service.booking.app.interface.i_seat_hold_store import ISeatHoldStore


class BlockSeatsUseCase:
    """
    Hold seats for a screening while the customer pays.

    The hold expires on its own after the configured TTL unless the booking is
    confirmed first. Only held seats are checked here; already-booked seats are
    rejected later, at confirmation time.
    """

    def __init__(self, *, seat_hold_store: ISeatHoldStore) -> None:
        self.seat_hold_store = seat_hold_store
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        seat_hold_store: ISeatHoldStore = Depends(Provide[Container.seat_hold_store]),
    ) -> Self:
        return cls(seat_hold_store=seat_hold_store)

    @Logger.io
    async def execute(self, *, movie: str, seats: List[str]) -> List[str]:
        with self.tracer.start_as_current_span(
            'use_case.block_seats',
            attributes={'movie': movie, 'seat.count': len(seats)},
        ) as span:
            try:
                held = await self.seat_hold_store.block_seats(movie=movie, seats=seats)
            except SeatConflictError as e:
                span.set_attribute('seat.conflicts', list(e.seats))
                metrics.record_hold(success=False)
                raise

            metrics.record_hold(success=True)
            return held
