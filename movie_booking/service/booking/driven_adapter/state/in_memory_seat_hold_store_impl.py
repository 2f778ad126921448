"""
In-memory Seat Hold Store

Process-local hold state with per-screening mutual exclusion and
sweep-on-access expiry.
"""

import time
from typing import Callable, Dict, List

from movie_booking.platform.exception.exceptions import DomainError, SeatConflictError
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.platform.metrics.booking_metrics import metrics
from movie_booking.platform.state.keyed_lock import KeyedLock
from movie_booking.service.booking.app.interface.i_seat_hold_store import ISeatHoldStore
from movie_booking.service.booking.domain.entity.seat_hold_entity import SeatHold


class InMemorySeatHoldStoreImpl(ISeatHoldStore):
    """
    Seat Hold Store backed by a dict

    Layout:
    - movie → {seat_label → owning SeatHold}, insertion-ordered
    - A seat maps to exactly one hold, so "at most one active hold per seat"
      holds structurally

    Expiry:
    - Every access evicts the screening's expired entries before doing
      anything else, so an expired seat is never reported or conflicted on
    - An entry is evicted only by its own hold's deadline: a seat released
      early and re-held by a newer hold keeps the newer deadline
    - sweep_expired() reclaims screenings nobody touches anymore
    """

    def __init__(
        self,
        *,
        ttl_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._held: Dict[str, Dict[str, SeatHold]] = {}
        self._lock = KeyedLock(name='seat_hold')

    def _evict_expired(self, *, movie: str, now: float) -> List[str]:
        """Drop expired entries of one screening. Caller must hold the screening lock."""
        held = self._held.get(movie)
        if not held:
            return []

        expired = [seat for seat, hold in held.items() if hold.is_expired(now=now)]
        for seat in expired:
            del held[seat]
        if not held:
            del self._held[movie]

        if expired:
            Logger.base.info(f'⌛ [HOLD] Expired {len(expired)} seat(s) for {movie}: {expired}')
            metrics.record_expired(count=len(expired))
        return expired

    @Logger.io
    async def block_seats(self, *, movie: str, seats: List[str]) -> List[str]:
        requested = list(dict.fromkeys(seats))  # de-duplicate, keep request order
        if not requested:
            raise DomainError('No seats requested')
        if any(not seat for seat in requested):
            raise DomainError('Seat labels must not be empty')

        async with self._lock.hold(movie):
            now = self._clock()
            self._evict_expired(movie=movie, now=now)

            held = self._held.get(movie, {})
            conflicts = [seat for seat in requested if seat in held]
            if conflicts:
                raise SeatConflictError('Some seats are already blocked', seats=conflicts)

            hold = SeatHold.create(
                movie=movie,
                seats=frozenset(requested),
                now=now,
                ttl_seconds=self._ttl_seconds,
            )
            for seat in requested:
                held[seat] = hold
            self._held[movie] = held

            Logger.base.info(
                f'🎟️ [HOLD] Blocked {requested} for {movie} '
                f'(hold={hold.id}, ttl={self._ttl_seconds}s, held={len(held)})'
            )
            metrics.record_seats_held(count=len(requested))
            return list(held)

    @Logger.io
    async def release_seats(self, *, movie: str, seats: List[str]) -> List[str]:
        async with self._lock.hold(movie):
            self._evict_expired(movie=movie, now=self._clock())

            held = self._held.get(movie)
            if not held:
                return []

            released = [
                seat for seat in dict.fromkeys(seats) if held.pop(seat, None) is not None
            ]
            if not held:
                del self._held[movie]

            if released:
                Logger.base.info(f'🔓 [HOLD] Released {released} for {movie}')
            metrics.record_seats_released(count=len(released))
            return released

    async def get_held_seats(self, *, movie: str) -> List[str]:
        async with self._lock.hold(movie):
            self._evict_expired(movie=movie, now=self._clock())
            return list(self._held.get(movie, {}))

    async def sweep_expired(self) -> int:
        released = 0
        for movie in list(self._held):
            async with self._lock.hold(movie):
                released += len(self._evict_expired(movie=movie, now=self._clock()))
        return released
