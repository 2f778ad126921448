from typing import FrozenSet

import attrs
from uuid_utils import UUID
import uuid_utils


@attrs.define(frozen=True)
class SeatHold:
    """
    One block request's worth of held seats.

    Timestamps come from the store's clock (monotonic seconds), not wall time.
    """

    id: UUID
    movie: str
    seats: FrozenSet[str]
    created_at: float
    expires_at: float

    @classmethod
    def create(
        cls, *, movie: str, seats: FrozenSet[str], now: float, ttl_seconds: float
    ) -> 'SeatHold':
        return cls(
            id=uuid_utils.uuid7(),
            movie=movie,
            seats=seats,
            created_at=now,
            expires_at=now + ttl_seconds,
        )

    def is_expired(self, *, now: float) -> bool:
        return now >= self.expires_at
