from dataclasses import dataclass, field
from enum import Enum
from typing import Any

NANOS_PER_MILLI = 1_000_000


@dataclass(frozen=True)
class AccessLogRecord:
    """One audited request as returned by the log store.

    The store may omit any field, so all of them are optional here; the
    translator decides which ones a span cannot do without.
    """

    request_id: str | None = None
    source_request_id: str | None = None
    user_id: str | None = None
    service: str | None = None
    method: str | None = None
    request: str | None = None
    result: str | None = None
    status: str | None = None
    timestamp: int | None = None
    duration: int | None = None


@dataclass
class LogQuery:
    namespace: str
    begin: int
    end: int
    user_id: str | None = None
    page_token: str | None = None
    limit: int = 1000


@dataclass
class LogPage:
    items: list[AccessLogRecord] = field(default_factory=list)
    scan_size: int = 0
    total_count: int = 0
    next_page_token: str | None = None


class SpanStatus(Enum):
    OK = "ok"
    ERROR = "error"
    UNSET = "unset"


@dataclass(frozen=True)
class SpanInstruction:
    """Everything needed to emit the span of one access log.

    ``span_id`` identifies the source request and is the parent of the
    emitted span, all zero for a root span. ``request_span_id`` is the
    emitted span's own ID.
    """

    trace_id: bytes
    span_id: bytes
    request_span_id: bytes
    name: str
    start_time_ms: int
    end_time_ms: int
    attributes: dict[str, Any]
    status: SpanStatus = SpanStatus.UNSET

    @property
    def start_time_ns(self) -> int:
        return self.start_time_ms * NANOS_PER_MILLI

    @property
    def end_time_ns(self) -> int:
        return self.end_time_ms * NANOS_PER_MILLI


@dataclass
class ExportSummary:
    pages: int = 0
    spans: int = 0
    scan_size: int = 0
    rows: int = 0
