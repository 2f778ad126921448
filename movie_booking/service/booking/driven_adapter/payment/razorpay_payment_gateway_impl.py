"""
Razorpay Payment Gateway

The razorpay SDK is synchronous (requests under the hood), so every call is
pushed to a worker thread to keep the event loop free.
"""

from functools import partial
from typing import Any, Dict, Optional

import anyio.to_thread
import razorpay
from razorpay.errors import SignatureVerificationError

from movie_booking.platform.exception.exceptions import GatewayError
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.booking.app.interface.i_payment_gateway import IPaymentGateway


class RazorpayPaymentGatewayImpl(IPaymentGateway):
    def __init__(
        self,
        *,
        key_id: str,
        key_secret: str,
        currency: str = 'INR',
        client: Optional[razorpay.Client] = None,
    ) -> None:
        self.currency = currency
        self._client = client or razorpay.Client(auth=(key_id, key_secret))

    @Logger.io
    async def create_order(self, *, amount_minor: int, receipt: str) -> Dict[str, Any]:
        data = {
            'amount': amount_minor,
            'currency': self.currency,
            'receipt': receipt,
            'payment_capture': 1,
        }
        try:
            order = await anyio.to_thread.run_sync(partial(self._client.order.create, data=data))
        except Exception as e:
            Logger.base.error(f'❌ [RAZORPAY] Order creation failed for {receipt}: {e}')
            raise GatewayError('Error creating order') from e

        Logger.base.info(
            f'💳 [RAZORPAY] Order {order.get("id")} created: '
            f'{amount_minor} {self.currency} (receipt={receipt})'
        )
        return order

    @Logger.io
    async def verify_payment_signature(
        self, *, order_id: str, payment_id: str, signature: str
    ) -> bool:
        params = {
            'razorpay_order_id': order_id,
            'razorpay_payment_id': payment_id,
            'razorpay_signature': signature,
        }
        try:
            await anyio.to_thread.run_sync(self._client.utility.verify_payment_signature, params)
        except SignatureVerificationError:
            Logger.base.warning(f'⚠️ [RAZORPAY] Signature mismatch for payment {payment_id}')
            return False
        return True
