"""OpenTelemetry OTLP exporter setup."""

import grpc
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (
    OTLPSpanExporter,
)

from accesstrace.exceptions import TelemetryConnectionError


def setup_otel_exporter(endpoint: str) -> OTLPSpanExporter:
    """Setup OpenTelemetry OTLP exporter.

    Args:
        endpoint: The collector address as host:port

    Returns:
        Configured OTLPSpanExporter instance
    """
    return OTLPSpanExporter(
        endpoint=endpoint,
        insecure=True,
    )


def check_collector(endpoint: str, timeout: float) -> None:
    """Block until the collector accepts a gRPC connection.

    The OTLP exporter connects lazily, so without this check an unreachable
    collector would only show up as dropped batches at the end of the run.

    Raises:
        TelemetryConnectionError: If the channel is not ready in time
    """
    channel = grpc.insecure_channel(endpoint)
    try:
        grpc.channel_ready_future(channel).result(timeout=timeout)
    except grpc.FutureTimeoutError as e:
        raise TelemetryConnectionError(
            f"Cannot connect to OpenTelemetry collector at {endpoint}",
            "Verify the collector host and port and that it is running",
        ) from e
    finally:
        channel.close()
