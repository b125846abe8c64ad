"""Translation of access log records into span instructions."""

from accesstrace.exceptions import RecordError
from accesstrace.models import AccessLogRecord, SpanInstruction, SpanStatus
from accesstrace.tracing.ids import (
    derive_request_span_id,
    derive_span_id,
    derive_trace_id,
)

# Fields without a usable default; a record missing any of them aborts
REQUIRED_FIELDS = {
    "request_id": str,
    "service": str,
    "method": str,
    "request": str,
    "result": str,
    "status": str,
    "timestamp": int,
    "duration": int,
}

OPTIONAL_FIELDS = {
    "source_request_id": str,
    "user_id": str,
}

STATUS_CODES = {
    "ok": SpanStatus.OK,
    "warning": SpanStatus.ERROR,
}


def span_status(status: str) -> SpanStatus:
    """Map a log status onto a span status.

    Only the exact values ``ok`` and ``warning`` are recognized, anything
    else leaves the span status unset.
    """
    return STATUS_CODES.get(status, SpanStatus.UNSET)


def _has_type(value, expected: type) -> bool:
    # bool is an int subclass but never a valid timestamp or duration
    return isinstance(value, expected) and not isinstance(value, bool)


def _check_required(record: AccessLogRecord) -> None:
    label = (
        record.request_id if isinstance(record.request_id, str) else "<unknown>"
    )
    missing = [name for name in REQUIRED_FIELDS if getattr(record, name) is None]
    if missing:
        raise RecordError(
            f"Access log {label} is missing required fields: "
            f"{', '.join(missing)}",
            "The log store returned an incomplete record",
        )

    expected_types = {**REQUIRED_FIELDS, **OPTIONAL_FIELDS}
    mistyped = [
        f"{name} ({type(value).__name__}, expected {expected.__name__})"
        for name, expected in expected_types.items()
        if (value := getattr(record, name)) is not None
        and not _has_type(value, expected)
    ]
    if mistyped:
        raise RecordError(
            f"Access log {label} has fields of the wrong type: "
            f"{', '.join(mistyped)}",
            "Check the field mapping of the log store",
        )

    if record.duration < 0:
        raise RecordError(
            f"Access log {label} has negative duration {record.duration}"
        )


def translate(record: AccessLogRecord) -> SpanInstruction:
    """Build the span instruction for one access log record.

    The span is named after the invoked method, starts at the record
    timestamp and lasts exactly ``duration`` milliseconds. Its own span ID
    comes from the request ID; the source request, when present, is its
    parent.

    Args:
        record: The access log record

    Returns:
        The span instruction for the record

    Raises:
        RecordError: If a required field is missing or mistyped, or an
            identifier is malformed
    """
    _check_required(record)

    trace_id = derive_trace_id(record.user_id)
    span_id = derive_span_id(record.source_request_id)
    request_span_id = derive_request_span_id(record.request_id)

    start_time_ms = record.timestamp
    end_time_ms = start_time_ms + record.duration

    attributes = {
        "requestId": record.request_id,
        "userId": record.user_id or "",
        "service": record.service,
        "method": record.method,
        "request": record.request,
        "result": record.result,
    }

    return SpanInstruction(
        trace_id=trace_id,
        span_id=span_id,
        request_span_id=request_span_id,
        name=record.method,
        start_time_ms=start_time_ms,
        end_time_ms=end_time_ms,
        attributes=attributes,
        status=span_status(record.status),
    )
