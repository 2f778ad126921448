from typing import List, Optional

from fastapi import APIRouter, Depends
from opentelemetry import trace

from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.platform.types.uuid7_types import UUID7
from movie_booking.service.booking.app.command.block_seats_use_case import BlockSeatsUseCase
from movie_booking.service.booking.app.query.get_booking_use_case import GetBookingUseCase
from movie_booking.service.booking.app.query.get_seat_status_use_case import (
    GetSeatStatusUseCase,
)
from movie_booking.service.booking.app.query.list_bookings_use_case import ListBookingsUseCase
from movie_booking.service.booking.domain.entity.booking_entity import Booking
from movie_booking.service.booking.driving_adapter.http_controller.schema.booking_schema import (
    BlockSeatsRequest,
    BlockSeatsResponse,
    BookingResponse,
    SeatStatusResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


def _to_response(booking: Booking) -> BookingResponse:
    return BookingResponse(
        id=booking.id,
        name=booking.name,
        phone=booking.phone_number,
        seats=booking.seats,
        movie=booking.movie,
        date=booking.date,
        time=booking.time,
        payment_id=booking.payment_id,
        created_at=booking.created_at,
    )


@router.post('/block-seats')
@Logger.io
async def block_seats(
    request: BlockSeatsRequest,
    use_case: BlockSeatsUseCase = Depends(BlockSeatsUseCase.depends),
) -> BlockSeatsResponse:
    with tracer.start_as_current_span('controller.block_seats') as span:
        span.set_attribute('movie', request.movie)
        held = await use_case.execute(movie=request.movie, seats=request.seats)
        return BlockSeatsResponse(blocked_seats=held)


@router.get('/booked-seats/{movie}')
@Logger.io
async def get_seat_status(
    movie: str,
    use_case: GetSeatStatusUseCase = Depends(GetSeatStatusUseCase.depends),
) -> SeatStatusResponse:
    seat_status = await use_case.execute(movie=movie)
    return SeatStatusResponse(booked_seats=seat_status.booked, blocked_seats=seat_status.held)


@router.get('')
@Logger.io
async def list_bookings(
    movie: Optional[str] = None,
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[BookingResponse]:
    bookings = await use_case.list_bookings(movie)
    return [_to_response(booking) for booking in bookings]


@router.get('/{booking_id}')
@Logger.io
async def get_booking(
    booking_id: UUID7,
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingResponse:
    booking = await use_case.get_booking(booking_id)
    return _to_response(booking)
