"""OpenTelemetry tracing for variant submissions.

Tracing stays a no-op unless an OTLP collector is configured through the
standard ``OTEL_*`` environment variables. Submission opens one span per
variant page through :func:`page_span`.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, Mapping

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, SpanExporter
from opentelemetry.sdk.trace.sampling import ALWAYS_OFF, ALWAYS_ON, ParentBased, Sampler, TraceIdRatioBased

LOGGER = logging.getLogger("seller_wizard.telemetry")

TRACER_NAME = "seller_wizard"
PAGE_SPAN_NAME = "variant_wizard.submit_page"

_DISABLED_FLAGS = {"0", "false", "off", "no"}
_INITIALISED = False


@dataclass(frozen=True)
class OtlpConfig:
    """Collector settings read from ``OTEL_EXPORTER_OTLP_*``."""

    endpoint: str
    headers: Mapping[str, str] = field(default_factory=dict)
    timeout: int | None = None
    certificate_file: str | None = None


def _parse_headers(raw: str | None) -> dict[str, str]:
    """Turn ``"a=1, b=2"`` into ``{"a": "1", "b": "2"}``; malformed pairs are dropped."""

    pairs = (fragment.partition("=") for fragment in (raw or "").split(","))
    return {key.strip(): value.strip() for key, sep, value in pairs if sep and key.strip()}


def _coerce_ratio(raw: str, *, default: float) -> float:
    if not raw:
        return default
    try:
        ratio = float(raw)
    except ValueError:
        LOGGER.warning("Ignoring OTEL_TRACES_SAMPLER_ARG=%r; sampling ratio stays %.2f", raw, default)
        return default
    return min(1.0, max(0.0, ratio))


def _build_sampler() -> Sampler:
    name = os.getenv("OTEL_TRACES_SAMPLER", "").strip().lower()
    ratio = _coerce_ratio(os.getenv("OTEL_TRACES_SAMPLER_ARG", "").strip(), default=1.0)
    samplers: dict[str, Sampler] = {
        "always_on": ALWAYS_ON,
        "always_off": ALWAYS_OFF,
        "traceidratio": TraceIdRatioBased(ratio),
        "parentbased_traceidratio": ParentBased(TraceIdRatioBased(ratio)),
    }
    if name and name not in samplers:
        LOGGER.warning("Unsupported OTEL_TRACES_SAMPLER %r; sampling parent-based by ratio", name)
    return samplers.get(name, samplers["parentbased_traceidratio"])


def _build_otlp_config() -> OtlpConfig | None:
    endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "").strip()
    if not endpoint:
        LOGGER.info("No OTLP endpoint configured; submission spans are not exported")
        return None
    timeout: int | None = None
    raw_timeout = os.getenv("OTEL_EXPORTER_OTLP_TIMEOUT", "").strip()
    if raw_timeout:
        try:
            timeout = int(float(raw_timeout))
        except ValueError:
            LOGGER.warning("Ignoring OTEL_EXPORTER_OTLP_TIMEOUT=%r", raw_timeout)
    return OtlpConfig(
        endpoint=endpoint,
        headers=_parse_headers(os.getenv("OTEL_EXPORTER_OTLP_HEADERS")),
        timeout=timeout,
        certificate_file=os.getenv("OTEL_EXPORTER_OTLP_CERTIFICATE", "").strip() or None,
    )


def _create_otlp_exporter(otlp: OtlpConfig) -> SpanExporter:
    from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter

    return OTLPSpanExporter(
        endpoint=otlp.endpoint,
        headers=dict(otlp.headers) or None,
        timeout=otlp.timeout,
        certificate_file=otlp.certificate_file,
    )


def setup_tracing(*, force: bool = False) -> None:
    """Install a global tracer provider exporting to the configured collector."""

    global _INITIALISED
    if _INITIALISED and not force:
        return
    if os.getenv("OTEL_TRACES_ENABLED", "1").strip().lower() in _DISABLED_FLAGS:
        LOGGER.info("Tracing disabled via OTEL_TRACES_ENABLED")
        return
    otlp = _build_otlp_config()
    if otlp is None:
        return

    service_name = os.getenv("OTEL_SERVICE_NAME", "seller-variant-wizard")
    provider = TracerProvider(resource=Resource.create({"service.name": service_name}), sampler=_build_sampler())
    provider.add_span_processor(BatchSpanProcessor(_create_otlp_exporter(otlp)))
    trace.set_tracer_provider(provider)
    _INITIALISED = True
    LOGGER.info("Exporting submission spans for '%s' to %s", service_name, otlp.endpoint)


def get_tracer() -> trace.Tracer:
    return trace.get_tracer(TRACER_NAME)


@contextmanager
def page_span(page: int, color: str) -> Iterator[trace.Span]:
    """Span covering the upload and create calls of one variant page."""

    with get_tracer().start_as_current_span(PAGE_SPAN_NAME) as span:
        span.set_attribute("variant.page", page)
        span.set_attribute("variant.color", color)
        yield span


__all__ = ["OtlpConfig", "PAGE_SPAN_NAME", "get_tracer", "page_span", "setup_tracing"]
