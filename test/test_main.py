"""
Test-specific FastAPI Application

No database, no tracing exporter and no background sweeper: infrastructure
providers are overridden by the `client` fixture.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from movie_booking.platform.app_factory import create_app
from movie_booking.platform.config.di import container
from movie_booking.platform.config.wire_modules import WIRE_MODULES
from movie_booking.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan_for_tests(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🧪 [Test App] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Test App] Dependency injection wired')

    yield

    container.unwire()
    Logger.base.info('👋 [Test App] Shutdown complete')


app = create_app(
    lifespan=lifespan_for_tests,
    title_suffix=' (Test)',
    description='Test Application - in-memory ledger, no background tasks',
    service_name='test-movie-booking',
)
