"""Payment verification and booking confirmation DTOs."""

from typing import Optional

import attrs

from movie_booking.service.booking.domain.entity.booking_entity import Booking


@attrs.define(frozen=True)
class PaymentProof:
    """Payment response returned by the gateway checkout to the client"""

    razorpay_payment_id: Optional[str] = None
    razorpay_order_id: Optional[str] = None
    razorpay_signature: Optional[str] = None

    @property
    def has_signature(self) -> bool:
        return bool(self.razorpay_order_id and self.razorpay_signature)


@attrs.define(frozen=True)
class BookingConfirmationResult:
    booking: Booking
    qr_code: str  # data:image/png;base64,...
