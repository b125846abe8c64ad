import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import (
    InMemorySpanExporter,
)

from accesstrace.config import Config
from accesstrace.tracing.otel import InstructionIdGenerator, SpanEmitter


@pytest.fixture
def span_exporter():
    return InMemorySpanExporter()


@pytest.fixture
def id_generator():
    return InstructionIdGenerator()


@pytest.fixture
def provider(span_exporter, id_generator):
    provider = TracerProvider(id_generator=id_generator)
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    return provider


@pytest.fixture
def emitter(provider, id_generator):
    return SpanEmitter(provider.get_tracer(__name__), id_generator)


@pytest.fixture
def config():
    return Config(namespace="namespace-0001")
