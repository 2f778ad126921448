from typing import Any, Dict

from fastapi import APIRouter, Depends
from opentelemetry import trace

from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.booking.app.command.create_payment_order_use_case import (
    CreatePaymentOrderUseCase,
)
from movie_booking.service.booking.app.command.verify_payment_and_confirm_booking_use_case import (
    VerifyPaymentAndConfirmBookingUseCase,
)
from movie_booking.service.booking.app.dto import PaymentProof
from movie_booking.service.booking.driving_adapter.http_controller.schema.payment_schema import (
    CreateOrderRequest,
    VerifyPaymentRequest,
    VerifyPaymentResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.post('/order')
@Logger.io
async def create_order(
    request: CreateOrderRequest,
    use_case: CreatePaymentOrderUseCase = Depends(CreatePaymentOrderUseCase.depends),
) -> Dict[str, Any]:
    """Create a gateway order; the order object is returned untouched for the checkout widget."""
    return await use_case.execute(amount=request.amount)


@router.post('/verify')
@Logger.io
async def verify_payment(
    request: VerifyPaymentRequest,
    use_case: VerifyPaymentAndConfirmBookingUseCase = Depends(
        VerifyPaymentAndConfirmBookingUseCase.depends
    ),
) -> VerifyPaymentResponse:
    with tracer.start_as_current_span('controller.verify_payment') as span:
        span.set_attribute('movie', request.movie)
        span.set_attribute('seat.count', len(request.seat_numbers))

        proof = request.payment_response
        result = await use_case.execute(
            proof=PaymentProof(
                razorpay_payment_id=proof.razorpay_payment_id,
                razorpay_order_id=proof.razorpay_order_id,
                razorpay_signature=proof.razorpay_signature,
            ),
            name=request.name,
            phone_number=request.phone,
            seats=request.seat_numbers,
            movie=request.movie,
        )
        span.set_attribute('booking.id', str(result.booking.id))
        return VerifyPaymentResponse(qr_code=result.qr_code)
