from prometheus_client import Counter, Gauge, Histogram


class BookingMetrics:
    """
    Booking service business metrics

    Tracks the seat-hold lifecycle (block / expire / promote) and the
    payment-verification outcome.

    Screening keys come from request input, so none of the series carry a
    movie label; per-screening detail goes to the logs instead.
    """

    def __init__(self) -> None:
        # ========== Seat Hold Metrics ==========
        self.seat_hold_requests = Counter(
            'seat_hold_requests_total',
            'Seat hold (block) requests',
            ['result'],  # result: success/conflict
        )

        self.seats_held = Gauge(
            'seats_held',
            'Seats currently held across all screenings',
        )

        self.seats_hold_expired = Counter(
            'seats_hold_expired_total',
            'Held seats released by expiry',
        )

        # ========== Booking Metrics ==========
        self.bookings_confirmed = Counter(
            'bookings_confirmed_total',
            'Bookings persisted after payment verification',
        )

        self.seats_booked = Counter(
            'seats_booked_total',
            'Seats persisted in confirmed bookings',
        )

        self.payment_verification_failures = Counter(
            'payment_verification_failures_total',
            'Payment verifications rejected',
            ['reason'],  # reason: missing_payment_id/bad_signature/seat_conflict
        )

        self.booking_confirmation_duration = Histogram(
            'booking_confirmation_duration_seconds',
            'Verify-and-confirm processing time',
            buckets=[0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0, 5.0],
        )

        # ========== Issue Report Metrics ==========
        self.issue_reports = Counter(
            'issue_reports_total',
            'Issue report emails',
            ['result'],  # result: sent/failed
        )

    def record_hold(self, *, success: bool) -> None:
        result = 'success' if success else 'conflict'
        self.seat_hold_requests.labels(result=result).inc()

    def record_seats_held(self, *, count: int) -> None:
        if count:
            self.seats_held.inc(count)

    def record_seats_released(self, *, count: int) -> None:
        if count:
            self.seats_held.dec(count)

    def record_expired(self, *, count: int) -> None:
        if count:
            self.seats_hold_expired.inc(count)
            self.seats_held.dec(count)

    def record_booking(self, *, seat_count: int) -> None:
        self.bookings_confirmed.inc()
        self.seats_booked.inc(seat_count)

    def record_verification_failure(self, *, reason: str) -> None:
        self.payment_verification_failures.labels(reason=reason).inc()

    def record_issue_report(self, *, sent: bool) -> None:
        self.issue_reports.labels(result='sent' if sent else 'failed').inc()


# Metrics register on the default prometheus registry, so only one instance
metrics = BookingMetrics()
