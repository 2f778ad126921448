import time
from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from movie_booking.platform.config.di import Container
from movie_booking.platform.exception.exceptions import SeatConflictError, VerificationError
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.platform.metrics.booking_metrics import metrics
from movie_booking.platform.state.keyed_lock import KeyedLock
from movie_booking.service.booking.app.dto import BookingConfirmationResult, PaymentProof
from movie_booking.service.booking.app.interface import (
    IBookingCommandRepo,
    IBookingQueryRepo,
    IPaymentGateway,
    IReceiptGenerator,
    ISeatHoldStore,
)
from movie_booking.service.booking.domain.entity.booking_entity import Booking


class VerifyPaymentAndConfirmBookingUseCase:
    """
    Promote held seats to a confirmed booking once payment is proven.

    Flow:
    1. Payment proof must carry a payment id (and a valid signature when the
       order id and signature are present)
    2. Under the screening's booking lock: reject seats already booked, then
       append the booking to the ledger
    3. Release the seats from the hold store
    4. Render the QR receipt

    Failure kinds:
    - VerificationError: nothing changed
    - SeatConflictError / InternalError: nothing persisted, holds untouched
    - ReceiptError: booking is persisted and holds released; only the receipt is missing

    Dependencies:
    - booking_lock: serializes confirmations per screening (in-process);
      the ledger's (movie, seat) unique key covers other processes
    """

    def __init__(
        self,
        *,
        booking_lock: KeyedLock,
        seat_hold_store: ISeatHoldStore,
        booking_command_repo: IBookingCommandRepo,
        booking_query_repo: IBookingQueryRepo,
        payment_gateway: IPaymentGateway,
        receipt_generator: IReceiptGenerator,
    ) -> None:
        self.booking_lock = booking_lock
        self.seat_hold_store = seat_hold_store
        self.booking_command_repo = booking_command_repo
        self.booking_query_repo = booking_query_repo
        self.payment_gateway = payment_gateway
        self.receipt_generator = receipt_generator
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        booking_lock: KeyedLock = Depends(Provide[Container.booking_lock]),
        seat_hold_store: ISeatHoldStore = Depends(Provide[Container.seat_hold_store]),
        booking_command_repo: IBookingCommandRepo = Depends(
            Provide[Container.booking_command_repo]
        ),
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
        payment_gateway: IPaymentGateway = Depends(Provide[Container.payment_gateway]),
        receipt_generator: IReceiptGenerator = Depends(Provide[Container.receipt_generator]),
    ) -> Self:
        return cls(
            booking_lock=booking_lock,
            seat_hold_store=seat_hold_store,
            booking_command_repo=booking_command_repo,
            booking_query_repo=booking_query_repo,
            payment_gateway=payment_gateway,
            receipt_generator=receipt_generator,
        )

    async def _verify_payment(self, *, proof: PaymentProof) -> str:
        if not proof.razorpay_payment_id:
            metrics.record_verification_failure(reason='missing_payment_id')
            raise VerificationError('Payment verification failed')

        if proof.has_signature:
            is_valid = await self.payment_gateway.verify_payment_signature(
                order_id=proof.razorpay_order_id or '',
                payment_id=proof.razorpay_payment_id,
                signature=proof.razorpay_signature or '',
            )
            if not is_valid:
                metrics.record_verification_failure(reason='bad_signature')
                raise VerificationError('Payment verification failed')

        return proof.razorpay_payment_id

    async def _persist_booking(
        self, *, payment_id: str, name: str, phone_number: str, seats: List[str], movie: str
    ) -> Booking:
        async with self.booking_lock.hold(movie):
            booked = set(await self.booking_query_repo.list_booked_seats(movie=movie))
            conflicts = [seat for seat in seats if seat in booked]
            if conflicts:
                Logger.base.warning(f'⚠️ [CONFIRM] {movie}: seats already booked {conflicts}')
                metrics.record_verification_failure(reason='seat_conflict')
                raise SeatConflictError('Some seats are already booked', seats=conflicts)

            booking = Booking.create(
                name=name,
                phone_number=phone_number,
                seats=seats,
                movie=movie,
                payment_id=payment_id,
            )
            return await self.booking_command_repo.create(booking=booking)

    @Logger.io
    async def execute(
        self,
        *,
        proof: PaymentProof,
        name: str,
        phone_number: str,
        seats: List[str],
        movie: str,
    ) -> BookingConfirmationResult:
        started = time.perf_counter()
        seats = list(dict.fromkeys(seats))  # same collapsing as block_seats

        with self.tracer.start_as_current_span(
            'use_case.verify_payment_and_confirm_booking',
            attributes={'movie': movie, 'seat.count': len(seats)},
        ) as span:
            payment_id = await self._verify_payment(proof=proof)
            span.set_attribute('payment.id', payment_id)

            booking = await self._persist_booking(
                payment_id=payment_id,
                name=name,
                phone_number=phone_number,
                seats=seats,
                movie=movie,
            )
            span.set_attribute('booking.id', str(booking.id))
            Logger.base.info(
                f'✅ [CONFIRM] Booking {booking.id} confirmed: {movie} {booking.seats} '
                f'(payment={payment_id})'
            )

            await self.seat_hold_store.release_seats(movie=movie, seats=booking.seats)
            metrics.record_booking(seat_count=len(booking.seats))
            metrics.booking_confirmation_duration.observe(time.perf_counter() - started)

            qr_code = await self.receipt_generator.generate(content=booking.receipt_text())
            return BookingConfirmationResult(booking=booking, qr_code=qr_code)
