from unittest.mock import AsyncMock

import pytest

from movie_booking.platform.exception.exceptions import SeatConflictError
from movie_booking.service.booking.app.command.block_seats_use_case import BlockSeatsUseCase


pytestmark = pytest.mark.unit


class TestBlockSeatsUseCase:
    def setup_method(self):
        self.seat_hold_store = AsyncMock()
        self.use_case = BlockSeatsUseCase(seat_hold_store=self.seat_hold_store)

    @pytest.mark.asyncio
    async def test_returns_held_set_from_store(self):
        self.seat_hold_store.block_seats.return_value = ['B1', 'A1', 'A2']

        held = await self.use_case.execute(movie='M', seats=['A1', 'A2'])

        assert held == ['B1', 'A1', 'A2']
        self.seat_hold_store.block_seats.assert_awaited_once_with(movie='M', seats=['A1', 'A2'])

    @pytest.mark.asyncio
    async def test_conflict_propagates(self):
        self.seat_hold_store.block_seats.side_effect = SeatConflictError(
            'Some seats are already blocked', seats=['A2']
        )

        with pytest.raises(SeatConflictError):
            await self.use_case.execute(movie='M', seats=['A2'])
