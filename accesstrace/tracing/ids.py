"""Deterministic trace and span identifiers derived from access log fields."""

import uuid

from accesstrace.exceptions import RecordError

TRACE_ID_BYTES = 16
SPAN_ID_BYTES = 8

INVALID_TRACE_ID = bytes(TRACE_ID_BYTES)
INVALID_SPAN_ID = bytes(SPAN_ID_BYTES)


def _uuid_bytes(value: str, field_name: str) -> bytes:
    try:
        return uuid.UUID(value).bytes
    except (ValueError, AttributeError, TypeError) as e:
        raise RecordError(
            f"Malformed {field_name} {value!r}: {e}",
            f"The {field_name} of every access log must be a UUID",
        ) from e


def derive_trace_id(user_id: str | None) -> bytes:
    """Map a user ID to a 16-byte trace ID.

    Every request made by the same user lands in the same trace. An absent
    or empty user ID gives the all-zero trace ID.

    Args:
        user_id: UUID-formatted user ID

    Returns:
        The raw UUID bytes

    Raises:
        RecordError: If the user ID is not a UUID
    """
    if not user_id:
        return INVALID_TRACE_ID
    return _uuid_bytes(user_id, "userId")


def derive_span_id(source_request_id: str | None) -> bytes:
    """Map a source request ID to an 8-byte span ID.

    The first 8 bytes of the UUID are used verbatim. An absent or empty
    source request ID gives the all-zero span ID, marking a root span.

    Raises:
        RecordError: If the source request ID is not a UUID
    """
    if not source_request_id:
        return INVALID_SPAN_ID
    return _uuid_bytes(source_request_id, "sourceRequestId")[:SPAN_ID_BYTES]


def derive_request_span_id(request_id: str) -> bytes:
    """Map a request ID to the 8-byte span ID of the request's own span.

    Raises:
        RecordError: If the request ID is not a UUID
    """
    return _uuid_bytes(request_id, "requestId")[:SPAN_ID_BYTES]


def id_to_int(identifier: bytes) -> int:
    """Convert a raw identifier to the integer form OpenTelemetry uses."""
    return int.from_bytes(identifier, "big")
