from abc import ABC, abstractmethod
from typing import Any, Dict


class IPaymentGateway(ABC):
    """Payment gateway boundary (order creation and payment-signature check)"""

    @abstractmethod
    async def create_order(self, *, amount_minor: int, receipt: str) -> Dict[str, Any]:
        """
        Create a payment order.

        Args:
            amount_minor: Amount in minor currency units (paise)
            receipt: Merchant receipt reference

        Returns:
            Gateway order object, passed through to the client as-is

        Raises:
            GatewayError: downstream call failed
        """
        pass

    @abstractmethod
    async def verify_payment_signature(
        self, *, order_id: str, payment_id: str, signature: str
    ) -> bool:
        """True when `signature` is the gateway's signature for order/payment"""
        pass
