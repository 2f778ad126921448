"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from movie_booking.platform.config.core_setting import Settings, settings
from movie_booking.platform.database.orm_db_setting import Database
from movie_booking.platform.state.keyed_lock import KeyedLock
from movie_booking.service.booking.driven_adapter.notification.smtp_issue_notifier_impl import (
    SmtpIssueNotifierImpl,
)
from movie_booking.service.booking.driven_adapter.payment.razorpay_payment_gateway_impl import (
    RazorpayPaymentGatewayImpl,
)
from movie_booking.service.booking.driven_adapter.receipt.qr_code_receipt_generator_impl import (
    QrCodeReceiptGeneratorImpl,
)
from movie_booking.service.booking.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)
from movie_booking.service.booking.driven_adapter.repo.booking_query_repo_impl import (
    BookingQueryRepoImpl,
)
from movie_booking.service.booking.driven_adapter.state.in_memory_seat_hold_store_impl import (
    InMemorySeatHoldStoreImpl,
)
from movie_booking.service.booking.driven_adapter.state.seat_hold_expiry_sweeper import (
    SeatHoldExpirySweeper,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (uses AsyncEngineManager with settings from core_setting)
    database = providers.Singleton(Database)

    # Seat Hold Store (process-local state, must be a Singleton)
    seat_hold_store = providers.Singleton(
        InMemorySeatHoldStoreImpl,
        ttl_seconds=settings.SEAT_HOLD_TTL_SECONDS,
    )
    seat_hold_sweeper = providers.Singleton(
        SeatHoldExpirySweeper,
        seat_hold_store=seat_hold_store,
        interval_seconds=settings.SEAT_HOLD_SWEEP_INTERVAL_SECONDS,
    )

    # Serializes booking confirmation per screening
    booking_lock = providers.Singleton(KeyedLock, name='booking')

    # Repositories (stateless - use session_factory per-request)
    booking_command_repo = providers.Singleton(
        BookingCommandRepoImpl, session_factory=database.provided.session
    )
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=database.provided.session
    )

    # External services
    payment_gateway = providers.Singleton(
        RazorpayPaymentGatewayImpl,
        key_id=settings.RAZORPAY_KEY_ID,
        key_secret=settings.RAZORPAY_KEY_SECRET.get_secret_value(),
        currency=settings.PAYMENT_CURRENCY,
    )
    receipt_generator = providers.Singleton(QrCodeReceiptGeneratorImpl)
    issue_notifier = providers.Singleton(
        SmtpIssueNotifierImpl,
        host=settings.SMTP_HOST,
        port=settings.SMTP_PORT,
        sender=settings.EMAIL,
        password=settings.EMAIL_PASSWORD.get_secret_value(),
        recipient=settings.ISSUE_REPORT_RECIPIENT,
        starttls=settings.SMTP_STARTTLS,
        timeout=settings.SMTP_TIMEOUT,
    )


container = Container()


def cleanup() -> None:
    container.reset_singletons()
