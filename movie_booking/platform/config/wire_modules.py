"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from movie_booking.service.booking.app.command import (
    block_seats_use_case,
    create_payment_order_use_case,
    report_issue_use_case,
    verify_payment_and_confirm_booking_use_case,
)
from movie_booking.service.booking.app.query import (
    get_booking_use_case,
    get_seat_status_use_case,
    list_bookings_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    block_seats_use_case,
    create_payment_order_use_case,
    verify_payment_and_confirm_booking_use_case,
    report_issue_use_case,
    get_seat_status_use_case,
    list_bookings_use_case,
    get_booking_use_case,
]
