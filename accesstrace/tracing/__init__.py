"""Replaying access logs as distributed traces.

This package holds the export pipeline:
- ids: trace and span IDs derived from log identifiers
- translator: access log record to span instruction
- fetcher: paginated retrieval from a log store
- exporter: the fetch, translate and emit loop
- otel: OpenTelemetry provider, ID generator and span emitter
"""

from accesstrace.tracing.exporter import AccessLogExporter
from accesstrace.tracing.fetcher import PageFetcher
from accesstrace.tracing.ids import (
    derive_request_span_id,
    derive_span_id,
    derive_trace_id,
)
from accesstrace.tracing.otel import (
    InstructionIdGenerator,
    SpanEmitter,
    check_collector,
    create_tracer_provider,
    setup_otel_exporter,
)
from accesstrace.tracing.translator import span_status, translate

__all__ = [
    "AccessLogExporter",
    "PageFetcher",
    "derive_trace_id",
    "derive_span_id",
    "derive_request_span_id",
    "translate",
    "span_status",
    "InstructionIdGenerator",
    "SpanEmitter",
    "check_collector",
    "create_tracer_provider",
    "setup_otel_exporter",
]
