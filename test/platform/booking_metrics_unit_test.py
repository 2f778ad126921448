from prometheus_client import REGISTRY, generate_latest
import pytest

from movie_booking.service.booking.driven_adapter.state.in_memory_seat_hold_store_impl import (
    InMemorySeatHoldStoreImpl,
)


pytestmark = pytest.mark.unit


def _seats_held() -> float:
    return REGISTRY.get_sample_value('seats_held') or 0.0


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class TestBookingMetrics:
    @pytest.mark.asyncio
    async def test_seats_held_gauge_follows_block_release_and_expiry(self):
        # Given
        clock = FakeClock()
        store = InMemorySeatHoldStoreImpl(ttl_seconds=60.0, clock=clock)
        before = _seats_held()

        # When: three seats held, one released, the rest expire
        await store.block_seats(movie='Metrics Movie', seats=['A1', 'A2', 'A3'])
        assert _seats_held() == before + 3

        await store.release_seats(movie='Metrics Movie', seats=['A1', 'A1', 'Z9'])
        assert _seats_held() == before + 2

        clock.now = 60.0
        assert await store.sweep_expired() == 2

        # Then
        assert _seats_held() == before

    @pytest.mark.asyncio
    async def test_series_carry_no_screening_label(self):
        store = InMemorySeatHoldStoreImpl()

        await store.block_seats(movie='client-chosen-key', seats=['A1'])

        exposition = generate_latest().decode()
        assert 'client-chosen-key' not in exposition
        assert 'movie=' not in exposition
