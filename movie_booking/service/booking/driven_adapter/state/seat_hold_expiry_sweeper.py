import anyio
from anyio.abc import TaskGroup

from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.booking.app.interface.i_seat_hold_store import ISeatHoldStore


class SeatHoldExpirySweeper:
    """Periodically evicts expired holds of screenings that see no traffic"""

    def __init__(self, *, seat_hold_store: ISeatHoldStore, interval_seconds: float = 5.0) -> None:
        self.seat_hold_store = seat_hold_store
        self._interval_seconds = interval_seconds

    async def start(self, *, task_group: TaskGroup) -> None:
        task_group.start_soon(self._sweep_loop)
        Logger.base.info(f'🧹 [Hold Sweeper] Started (interval={self._interval_seconds}s)')

    async def _sweep_loop(self) -> None:
        while True:
            await anyio.sleep(self._interval_seconds)
            await self.sweep_once()

    async def sweep_once(self) -> int:
        try:
            released = await self.seat_hold_store.sweep_expired()
        except Exception as e:
            Logger.base.exception(f'❌ [Hold Sweeper] Sweep failed: {e}')
            return 0
        if released:
            Logger.base.debug(f'🧹 [Hold Sweeper] Released {released} expired seat(s)')
        return released
