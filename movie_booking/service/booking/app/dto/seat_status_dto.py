from typing import List

import attrs


@attrs.define(frozen=True)
class SeatStatus:
    """Seat occupancy of one screening: permanently booked vs. temporarily held"""

    booked: List[str]
    held: List[str]
