import datetime as dt
from typing import Annotated, List, Optional

from pydantic import BaseModel, Field

from movie_booking.platform.types.uuid7_types import UUID7


SeatLabel = Annotated[str, Field(min_length=1)]


class BlockSeatsRequest(BaseModel):
    movie: str = Field(min_length=1)
    seats: List[SeatLabel] = Field(min_length=1)

    class Config:
        json_schema_extra = {'example': {'movie': 'Inception', 'seats': ['A1', 'A2']}}


class BlockSeatsResponse(BaseModel):
    model_config = {
        'populate_by_name': True,
        'json_schema_extra': {
            'example': {'message': 'Seats temporarily blocked', 'blockedSeats': ['A1', 'A2']}
        },
    }

    message: str = 'Seats temporarily blocked'
    blocked_seats: List[str] = Field(alias='blockedSeats')


class SeatStatusResponse(BaseModel):
    model_config = {'populate_by_name': True}

    booked_seats: List[str] = Field(alias='bookedSeats')
    blocked_seats: List[str] = Field(alias='blockedSeats')


class BookingResponse(BaseModel):
    model_config = {
        'populate_by_name': True,
        'json_schema_extra': {
            'example': {
                'id': '01936d8f-5e73-7c4e-a9c5-123456789abc',  # UUID7
                'name': 'Asha',
                'phone': '9876543210',
                'seats': ['A1', 'A2'],
                'movie': 'Inception',
                'date': '2025-01-10',
                'time': '10:30:00',
                'paymentId': 'pay_29QQoUBi66xm2f',
                'createdAt': '2025-01-10T10:30:00Z',
            }
        },
    }

    id: UUID7
    name: str
    phone: str
    seats: List[str]
    movie: str
    date: dt.date
    time: dt.time
    payment_id: str = Field(alias='paymentId')
    created_at: Optional[dt.datetime] = Field(default=None, alias='createdAt')
