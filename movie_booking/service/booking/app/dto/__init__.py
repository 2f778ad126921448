"""Booking Application DTOs"""

from movie_booking.service.booking.app.dto.booking_confirmation_dto import (
    BookingConfirmationResult,
    PaymentProof,
)
from movie_booking.service.booking.app.dto.seat_status_dto import SeatStatus


__all__ = [
    'BookingConfirmationResult',
    'PaymentProof',
    'SeatStatus',
]
