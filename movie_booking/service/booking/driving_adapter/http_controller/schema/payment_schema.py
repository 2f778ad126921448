from typing import List, Optional

from pydantic import BaseModel, Field

from movie_booking.service.booking.driving_adapter.http_controller.schema.booking_schema import (
    SeatLabel,
)


class CreateOrderRequest(BaseModel):
    amount: float = Field(gt=0, description='Amount in major currency units (INR)')

    class Config:
        json_schema_extra = {'example': {'amount': 500}}


class PaymentResponseSchema(BaseModel):
    """Checkout result handed to the client by the payment gateway"""

    razorpay_payment_id: Optional[str] = None
    razorpay_order_id: Optional[str] = None
    razorpay_signature: Optional[str] = None


class VerifyPaymentRequest(BaseModel):
    model_config = {
        'populate_by_name': True,
        'json_schema_extra': {
            'example': {
                'paymentResponse': {
                    'razorpay_payment_id': 'pay_29QQoUBi66xm2f',
                    'razorpay_order_id': 'order_9A33XWu170gUtm',
                    'razorpay_signature': '9ef4dffbfd84f1318f6739a3ce19f9d85851857ae648f114332d8401e0949a3d',
                },
                'name': 'Asha',
                'phone': '9876543210',
                'seatNumbers': ['A1', 'A2'],
                'movie': 'Inception',
            }
        },
    }

    payment_response: PaymentResponseSchema = Field(alias='paymentResponse')
    name: str
    phone: str
    seat_numbers: List[SeatLabel] = Field(alias='seatNumbers', min_length=1)
    movie: str = Field(min_length=1)


class VerifyPaymentResponse(BaseModel):
    model_config = {'populate_by_name': True}

    message: str = 'Payment verified, booking confirmed!'
    qr_code: str = Field(alias='qrCode')
