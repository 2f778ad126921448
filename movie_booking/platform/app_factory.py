"""
FastAPI app factory shared by the server entrypoint and the test app.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse, RedirectResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from movie_booking.platform.config.core_setting import settings
from movie_booking.platform.exception.exception_handlers import register_exception_handlers
from movie_booking.platform.observability.tracing import TracingConfig
from movie_booking.service.booking.driving_adapter.http_controller import (
    booking_controller,
    issue_report_controller,
    payment_controller,
)


# (router, prefix, tag); the issue report route keeps its legacy root path
ROUTES: tuple[tuple[APIRouter, str, str], ...] = (
    (booking_controller.router, '/api/bookings', 'booking'),
    (payment_controller.router, '/api/payment', 'payment'),
    (issue_report_controller.router, '', 'issue-report'),
)

ops_router = APIRouter(tags=['ops'])


@ops_router.get('/', include_in_schema=False)
async def root() -> RedirectResponse:
    return RedirectResponse(url='/docs')


@ops_router.get('/health')
async def health_check() -> dict[str, str]:
    """Liveness probe"""
    return {'status': 'healthy', 'service': settings.PROJECT_NAME}


@ops_router.get('/metrics')
async def get_metrics() -> PlainTextResponse:
    return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Movie seat booking with Razorpay checkout and QR receipts',
    service_name: str = 'movie-booking',
) -> FastAPI:
    """
    Args:
        lifespan: startup/shutdown context; the test app passes a lighter one
        title_suffix: appended to the OpenAPI title, e.g. " (Test)"
        description: OpenAPI description
        service_name: OpenTelemetry service name
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Instrumentation has to wrap the app before any route is mounted
    TracingConfig(service_name=service_name).instrument_fastapi(app=app)

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )
    register_exception_handlers(app)

    for router, prefix, tag in ROUTES:
        app.include_router(router, prefix=prefix, tags=[tag])
    app.include_router(ops_router)

    return app
