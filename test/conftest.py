"""
Test Configuration and Fixtures

Architecture:
- Unit tests (test/**/unit/): plain objects with AsyncMock / in-memory fakes
- API tests (test/service/booking/api/): FastAPI TestClient against the test
  app, with infrastructure providers overridden in the DI container
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks read the environment at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    os.environ['POSTGRES_DB'] = 'movie_booking_test_db'
    os.environ.setdefault('RAZORPAY_KEY_ID', 'rzp_test_key')
    os.environ.setdefault('RAZORPAY_KEY_SECRET', 'rzp_test_secret')
    os.environ.setdefault('EMAIL', 'support@movie-booking.test')

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402

from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from movie_booking.platform.config.di import cleanup, container  # noqa: E402
from movie_booking.platform.state.keyed_lock import KeyedLock  # noqa: E402
from movie_booking.service.booking.driven_adapter.state.in_memory_seat_hold_store_impl import (  # noqa: E402
    InMemorySeatHoldStoreImpl,
)
from test.fakes import (  # noqa: E402
    FakeIssueNotifier,
    FakePaymentGateway,
    FakeReceiptGenerator,
    InMemoryBookingLedger,
)


@pytest.fixture
def ledger() -> InMemoryBookingLedger:
    return InMemoryBookingLedger()


@pytest.fixture
def payment_gateway() -> FakePaymentGateway:
    return FakePaymentGateway()


@pytest.fixture
def issue_notifier() -> FakeIssueNotifier:
    return FakeIssueNotifier()


@pytest.fixture
def seat_hold_store() -> InMemorySeatHoldStoreImpl:
    return InMemorySeatHoldStoreImpl(ttl_seconds=60.0)


@pytest.fixture
def client(
    ledger: InMemoryBookingLedger,
    payment_gateway: FakePaymentGateway,
    issue_notifier: FakeIssueNotifier,
    seat_hold_store: InMemorySeatHoldStoreImpl,
) -> Generator[TestClient, None, None]:
    """
    TestClient with every infrastructure provider replaced:
    - PostgreSQL ledger -> InMemoryBookingLedger
    - Razorpay / SMTP -> recording fakes
    - fresh hold store and booking lock per test
    The QR receipt generator stays real.
    """
    from test.test_main import app

    overrides = {
        container.booking_command_repo: ledger,
        container.booking_query_repo: ledger,
        container.payment_gateway: payment_gateway,
        container.issue_notifier: issue_notifier,
        container.seat_hold_store: seat_hold_store,
        container.booking_lock: KeyedLock(name='booking'),
    }
    for provider, instance in overrides.items():
        provider.override(providers.Object(instance))

    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        for provider in overrides:
            provider.reset_override()
        cleanup()


@pytest.fixture
def receipt_generator() -> FakeReceiptGenerator:
    return FakeReceiptGenerator()
