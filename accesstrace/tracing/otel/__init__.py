"""OpenTelemetry module for replaying access logs as spans.

Submodules:
- exporter: OTLP exporter setup and collector reachability check
- tracer: Tracer provider creation
- id_generator: Caller-assigned trace and span IDs
- emitter: Span emission from span instructions
"""

from accesstrace.tracing.otel.emitter import SpanEmitter
from accesstrace.tracing.otel.exporter import (
    check_collector,
    setup_otel_exporter,
)
from accesstrace.tracing.otel.id_generator import InstructionIdGenerator
from accesstrace.tracing.otel.tracer import create_tracer_provider

__all__ = [
    "setup_otel_exporter",
    "check_collector",
    "create_tracer_provider",
    "InstructionIdGenerator",
    "SpanEmitter",
]
