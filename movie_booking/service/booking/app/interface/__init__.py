from movie_booking.service.booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from movie_booking.service.booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from movie_booking.service.booking.app.interface.i_issue_notifier import IIssueNotifier
from movie_booking.service.booking.app.interface.i_payment_gateway import IPaymentGateway
from movie_booking.service.booking.app.interface.i_receipt_generator import IReceiptGenerator
from movie_booking.service.booking.app.interface.i_seat_hold_store import ISeatHoldStore


__all__ = [
    'IBookingCommandRepo',
    'IBookingQueryRepo',
    'IIssueNotifier',
    'IPaymentGateway',
    'IReceiptGenerator',
    'ISeatHoldStore',
]
