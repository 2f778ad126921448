import time
from typing import Any, Dict, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from movie_booking.platform.config.di import Container
from movie_booking.platform.exception.exceptions import DomainError
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.booking.app.interface.i_payment_gateway import IPaymentGateway


def to_minor_units(amount: float) -> int:
    """Major currency units (rupees) -> minor units (paise), rounded"""
    return int(round(amount * 100))


class CreatePaymentOrderUseCase:
    def __init__(self, *, payment_gateway: IPaymentGateway) -> None:
        self.payment_gateway = payment_gateway
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        payment_gateway: IPaymentGateway = Depends(Provide[Container.payment_gateway]),
    ) -> Self:
        return cls(payment_gateway=payment_gateway)

    @Logger.io
    async def execute(self, *, amount: float) -> Dict[str, Any]:
        """
        Create a gateway order for `amount` (major units).

        Raises:
            DomainError: amount is not positive
            GatewayError: the gateway call failed
        """
        amount_minor = to_minor_units(amount)
        if amount_minor <= 0:
            raise DomainError('Amount must be greater than zero')

        receipt = f'order_{int(time.time() * 1000)}'
        with self.tracer.start_as_current_span(
            'use_case.create_payment_order',
            attributes={'order.amount_minor': amount_minor, 'order.receipt': receipt},
        ):
            return await self.payment_gateway.create_order(
                amount_minor=amount_minor, receipt=receipt
            )
