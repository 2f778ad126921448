"""
OpenTelemetry tracing

- Exporters: OTLP/gRPC when OTEL_EXPORTER_OTLP_ENDPOINT is set, console when
  OTEL_CONSOLE_EXPORT is on
- Sampling: parent-based, root spans sampled at OTEL_SAMPLE_RATIO
- Auto-instrumentation: FastAPI routes and the SQLAlchemy engine; use cases
  open their own spans through trace.get_tracer(__name__)
"""

from typing import Any

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import SpanProcessor, TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.trace.sampling import ParentBased, TraceIdRatioBased

from movie_booking.platform.config.core_setting import settings
from movie_booking.platform.logging.loguru_io import Logger


class TracingConfig:
    """
    Usage:
        tracing = TracingConfig(service_name='movie-booking')
        tracing.setup()
        ...
        tracing.shutdown()
    """

    def __init__(
        self,
        *,
        service_name: str,
        otlp_endpoint: str | None = None,
        enable_console: bool | None = None,
        sample_ratio: float | None = None,
    ) -> None:
        self.service_name = service_name
        self.otlp_endpoint = otlp_endpoint or settings.OTEL_EXPORTER_OTLP_ENDPOINT
        self.enable_console = (
            settings.OTEL_CONSOLE_EXPORT if enable_console is None else enable_console
        )
        self.sample_ratio = settings.OTEL_SAMPLE_RATIO if sample_ratio is None else sample_ratio
        self._provider: TracerProvider | None = None

    def _span_processors(self) -> list[SpanProcessor]:
        processors: list[SpanProcessor] = []
        if self.otlp_endpoint:
            processors.append(BatchSpanProcessor(OTLPSpanExporter(endpoint=self.otlp_endpoint)))
        if self.enable_console:
            processors.append(BatchSpanProcessor(ConsoleSpanExporter()))
        return processors

    def setup(self) -> None:
        """Install the global tracer provider. Call once at startup."""
        resource = Resource(
            attributes={SERVICE_NAME: self.service_name, SERVICE_VERSION: settings.VERSION}
        )
        self._provider = TracerProvider(
            resource=resource,
            sampler=ParentBased(root=TraceIdRatioBased(self.sample_ratio)),
        )
        processors = self._span_processors()
        for processor in processors:
            self._provider.add_span_processor(processor)

        trace.set_tracer_provider(self._provider)
        Logger.base.debug(
            f'📊 [Tracing] {self.service_name}: {len(processors)} exporter(s), '
            f'sample_ratio={self.sample_ratio}'
        )

    def instrument_fastapi(self, *, app: Any, excluded_urls: str = 'health,metrics') -> None:
        FastAPIInstrumentor.instrument_app(app, excluded_urls=excluded_urls)

    def instrument_sqlalchemy(self, *, engine: Any) -> None:
        # AsyncEngine is instrumented through the sync engine it wraps
        sync_engine = getattr(engine, 'sync_engine', engine)
        SQLAlchemyInstrumentor().instrument(engine=sync_engine)

    def shutdown(self) -> None:
        """Flush pending spans."""
        if self._provider is not None:
            self._provider.shutdown()
            self._provider = None
