"""
Production FastAPI Application

Booking API with the seat hold expiry sweeper running in the background.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import anyio
from fastapi import FastAPI
import uvicorn

from movie_booking.platform.app_factory import create_app
from movie_booking.platform.config.core_setting import settings
from movie_booking.platform.config.di import container
from movie_booking.platform.config.wire_modules import WIRE_MODULES
from movie_booking.platform.database.orm_db_setting import (
    create_db_and_tables,
    dispose_engine,
    get_engine,
)
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Movie Booking] Starting up...')

    tracing = TracingConfig(service_name='movie-booking')
    tracing.setup()
    Logger.base.info('📊 [Movie Booking] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Movie Booking] Dependency injection wired')

    await create_db_and_tables()
    tracing.instrument_sqlalchemy(engine=get_engine())
    Logger.base.info('🗄️  [Movie Booking] Database ready + instrumented')

    async with anyio.create_task_group() as tg:
        await container.seat_hold_sweeper().start(task_group=tg)
        Logger.base.info('✅ [Movie Booking] Ready to serve requests')

        yield

        Logger.base.info('🛑 [Movie Booking] Shutting down...')
        tg.cancel_scope.cancel()

    await dispose_engine()
    Logger.base.info('🗄️  [Movie Booking] Database engine disposed')

    tracing.shutdown()
    Logger.base.info('📊 [Movie Booking] Tracing shutdown complete')

    container.unwire()

    Logger.base.info('👋 [Movie Booking] Shutdown complete')


app = create_app(lifespan=lifespan)


if __name__ == '__main__':
    uvicorn.run('movie_booking.main:app', host='0.0.0.0', port=settings.PORT)
