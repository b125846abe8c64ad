"""Emission of span instructions through an OpenTelemetry tracer."""

from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.trace import (
    NonRecordingSpan,
    SpanContext,
    Status,
    StatusCode,
    TraceFlags,
)

from accesstrace.models import SpanInstruction, SpanStatus
from accesstrace.tracing.ids import id_to_int
from accesstrace.tracing.otel.id_generator import InstructionIdGenerator

STATUS_CODES = {
    SpanStatus.OK: StatusCode.OK,
    SpanStatus.ERROR: StatusCode.ERROR,
}


def parent_context(trace_id: int, parent_span_id: int) -> Context:
    """Build the context a span is started in.

    A valid parent span context makes the span a child of the source
    request. Without one, the span is started from an empty context so it
    never picks up an ambient parent.
    """
    parent = SpanContext(
        trace_id=trace_id,
        span_id=parent_span_id,
        is_remote=False,
        trace_flags=TraceFlags(TraceFlags.SAMPLED),
    )
    if not parent.is_valid:
        return Context()
    return trace.set_span_in_context(NonRecordingSpan(parent), Context())


class SpanEmitter:
    """Turns span instructions into finished spans."""

    def __init__(
        self, tracer: trace.Tracer, id_generator: InstructionIdGenerator
    ):
        """Initialize the emitter.

        Args:
            tracer: Tracer obtained from a provider built with id_generator
            id_generator: The provider's ID generator
        """
        self.tracer = tracer
        self.id_generator = id_generator

    def emit(self, instruction: SpanInstruction) -> None:
        """Start, annotate and end one span with the instruction's timing.

        The span's own ID is the request span ID. Its parent is the source
        request span, when the instruction has one.
        """
        trace_id = id_to_int(instruction.trace_id)
        context = parent_context(trace_id, id_to_int(instruction.span_id))

        with self.id_generator.assign(
            trace_id, id_to_int(instruction.request_span_id)
        ):
            span = self.tracer.start_span(
                name=instruction.name,
                context=context,
                kind=trace.SpanKind.INTERNAL,
                start_time=instruction.start_time_ns,
            )

        for key, value in instruction.attributes.items():
            span.set_attribute(key, value)

        status_code = STATUS_CODES.get(instruction.status)
        if status_code is not None:
            span.set_status(Status(status_code))

        span.end(end_time=instruction.end_time_ns)
