from unittest.mock import AsyncMock

import pytest

from movie_booking.platform.exception.exceptions import DomainError, GatewayError
from movie_booking.service.booking.app.command.create_payment_order_use_case import (
    CreatePaymentOrderUseCase,
    to_minor_units,
)


pytestmark = pytest.mark.unit


class TestToMinorUnits:
    @pytest.mark.parametrize(
        ('amount', 'expected'),
        [(500, 50000), (199.99, 19999), (19.99, 1999), (1, 100)],
    )
    def test_rounds_to_paise(self, amount, expected):
        assert to_minor_units(amount) == expected


class TestCreatePaymentOrderUseCase:
    def setup_method(self):
        self.payment_gateway = AsyncMock()
        self.payment_gateway.create_order.return_value = {'id': 'order_1', 'amount': 50000}
        self.use_case = CreatePaymentOrderUseCase(payment_gateway=self.payment_gateway)

    @pytest.mark.asyncio
    async def test_passes_minor_units_and_receipt(self):
        order = await self.use_case.execute(amount=500)

        assert order == {'id': 'order_1', 'amount': 50000}
        kwargs = self.payment_gateway.create_order.await_args.kwargs
        assert kwargs['amount_minor'] == 50000
        assert kwargs['receipt'].startswith('order_')
        assert kwargs['receipt'].removeprefix('order_').isdigit()

    @pytest.mark.asyncio
    async def test_non_positive_amount_is_rejected(self):
        with pytest.raises(DomainError):
            await self.use_case.execute(amount=0.001)

        self.payment_gateway.create_order.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_gateway_failure_propagates(self):
        self.payment_gateway.create_order.side_effect = GatewayError('Error creating order')

        with pytest.raises(GatewayError):
            await self.use_case.execute(amount=100)
