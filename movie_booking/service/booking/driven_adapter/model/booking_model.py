import datetime as dt
from typing import List
import uuid

from sqlalchemy import ARRAY, Date, DateTime, ForeignKey, Integer, String, Time, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from movie_booking.platform.database.orm_db_setting import Base


class BookingModel(Base):
    __tablename__ = 'booking'

    id: Mapped[uuid.UUID] = mapped_column(PG_UUID(as_uuid=True), primary_key=True)  # UUID7
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(32), nullable=False)
    movie: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    seats: Mapped[List[str]] = mapped_column(ARRAY(String), nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    time: Mapped[dt.time] = mapped_column(Time, nullable=False)
    payment_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    booked_seats: Mapped[List['BookedSeatModel']] = relationship(
        back_populates='booking', cascade='all, delete-orphan', lazy='raise'
    )


class BookedSeatModel(Base):
    """One row per booked seat; the unique key makes double booking impossible"""

    __tablename__ = 'booked_seat'
    __table_args__ = (UniqueConstraint('movie', 'seat_label', name='uq_booked_seat_movie_seat'),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    booking_id: Mapped[uuid.UUID] = mapped_column(
        PG_UUID(as_uuid=True), ForeignKey('booking.id'), nullable=False, index=True
    )
    movie: Mapped[str] = mapped_column(String(255), nullable=False)
    seat_label: Mapped[str] = mapped_column(String(32), nullable=False)

    booking: Mapped[BookingModel] = relationship(back_populates='booked_seats', lazy='raise')
