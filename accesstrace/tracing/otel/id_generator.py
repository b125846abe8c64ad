"""ID generator that hands out identifiers chosen by the caller."""

from contextlib import contextmanager
from typing import Iterator

from opentelemetry.sdk.trace.id_generator import IdGenerator, RandomIdGenerator


class InstructionIdGenerator(IdGenerator):
    """Returns the trace and span IDs assigned for the span being started.

    The SDK asks its ID generator for new identifiers without telling it
    which span they are for, so the emitter assigns them explicitly for
    the duration of one ``start_span`` call. Outside an assignment the
    generator falls back to random identifiers.
    """

    def __init__(self):
        self._fallback = RandomIdGenerator()
        self._trace_id: int | None = None
        self._span_id: int | None = None

    @contextmanager
    def assign(self, trace_id: int, span_id: int) -> Iterator[None]:
        self._trace_id = trace_id
        self._span_id = span_id
        try:
            yield
        finally:
            self._trace_id = None
            self._span_id = None

    def generate_trace_id(self) -> int:
        if self._trace_id is None:
            return self._fallback.generate_trace_id()
        return self._trace_id

    def generate_span_id(self) -> int:
        if self._span_id is None:
            return self._fallback.generate_span_id()
        return self._span_id
