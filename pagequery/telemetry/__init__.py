"""Telemetry helpers for exposing Prometheus metrics and OpenTelemetry traces."""

from __future__ import annotations

import re
import time
from typing import Dict

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from .. import __version__
from ..core.config import get_settings
from .metrics import REQUEST_COUNT, REQUEST_LATENCY

_uuid_pattern = re.compile(r"/[0-9a-fA-F-]{32,36}")
_numeric_pattern = re.compile(r"/\d+")
_tracing_configured = False


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Count and time requests, labelled by route template when one matched."""

    def __init__(self, app, metrics_path: str = "/metrics") -> None:
        super().__init__(app)
        self.metrics_path = metrics_path

    async def dispatch(self, request: Request, call_next):  # type: ignore[override]
        start = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - start
        if request.url.path == self.metrics_path:
            return response
        path = route_label(request)
        REQUEST_COUNT.labels(
            method=request.method, path=path, status=str(response.status_code)
        ).inc()
        REQUEST_LATENCY.labels(method=request.method, path=path).observe(duration)
        return response


def route_label(request: Request) -> str:
    route = request.scope.get("route")
    template = getattr(route, "path_format", None) or getattr(route, "path", None)
    if template:
        return template
    return normalise_path(request.url.path)


def setup_prometheus(app: FastAPI) -> None:
    """Attach middleware and metrics endpoint."""

    metrics_path = get_settings().prometheus_metrics_path
    app.add_middleware(PrometheusMiddleware, metrics_path=metrics_path)

    @app.get(metrics_path, include_in_schema=False)
    async def prometheus_metrics() -> Response:
        return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)


def configure_tracing(app: FastAPI) -> None:
    """Configure OpenTelemetry exporters when enabled via settings."""

    global _tracing_configured
    settings = get_settings()
    if not settings.otel_exporter_otlp_endpoint:
        return
    if _tracing_configured:
        FastAPIInstrumentor.instrument_app(app)
        return

    resource = Resource.create(
        {
            "service.name": settings.otel_service_name or settings.app_name,
            "service.version": __version__,
        }
    )
    provider = TracerProvider(resource=resource)
    exporter = OTLPSpanExporter(
        endpoint=settings.otel_exporter_otlp_endpoint,
        headers=parse_headers(settings.otel_exporter_otlp_headers),
    )
    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)
    FastAPIInstrumentor.instrument_app(app, tracer_provider=provider)
    _tracing_configured = True


def normalise_path(path: str) -> str:
    path = _uuid_pattern.sub("/{uuid}", path)
    path = _numeric_pattern.sub("/{id}", path)
    if not path:
        return "/"
    return path


def parse_headers(raw: str | None) -> Dict[str, str]:
    if not raw:
        return {}
    headers: Dict[str, str] = {}
    for part in raw.split(","):
        if "=" not in part:
            continue
        key, value = part.split("=", 1)
        headers[key.strip()] = value.strip()
    return headers
