"""
Seat Hold Store Interface

Owns the transient hold state: screening -> currently held seat labels.
"""

from abc import ABC, abstractmethod
from typing import List


class ISeatHoldStore(ABC):
    """
    Seat Hold Store Interface

    Every mutation of one screening's held set is serialized; different
    screenings never contend.
    """

    @abstractmethod
    async def block_seats(self, *, movie: str, seats: List[str]) -> List[str]:
        """
        Atomically hold `seats` for `movie` as one expiring hold batch.

        Only other active holds are checked; booked seats are not.

        Returns:
            Full held set for the screening after the block (insertion order)

        Raises:
            SeatConflictError: any requested seat is already held
        """
        pass

    @abstractmethod
    async def release_seats(self, *, movie: str, seats: List[str]) -> List[str]:
        """
        Remove `seats` from the held set. Idempotent: seats that are not held
        (already promoted or expired) are ignored.

        Returns:
            Seats actually removed by this call
        """
        pass

    @abstractmethod
    async def get_held_seats(self, *, movie: str) -> List[str]:
        """Snapshot of currently held (non-expired) seats for the screening"""
        pass

    @abstractmethod
    async def sweep_expired(self) -> int:
        """Drop expired holds across all screenings. Returns released seat count."""
        pass
