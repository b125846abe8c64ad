"""OpenTelemetry tracer provider creation."""

from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, SpanExporter
from opentelemetry.sdk.trace.sampling import ALWAYS_ON

from accesstrace.tracing.otel.id_generator import InstructionIdGenerator


def create_tracer_provider(
    service_name: str,
    exporter: SpanExporter,
    id_generator: InstructionIdGenerator,
) -> TracerProvider:
    """Create the tracer provider for replayed access logs.

    The provider is returned to the caller and never registered as the
    global provider.

    Args:
        service_name: Value of the service.name resource attribute
        exporter: The exporter spans are batched into
        id_generator: Generator supplying each span's identifiers

    Returns:
        The configured provider
    """
    resource = Resource(attributes={SERVICE_NAME: service_name})
    provider = TracerProvider(
        sampler=ALWAYS_ON,
        resource=resource,
        id_generator=id_generator,
    )
    provider.add_span_processor(BatchSpanProcessor(exporter))
    return provider
