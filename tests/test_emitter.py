"""Tests for span emission through the OpenTelemetry SDK."""

from opentelemetry.trace import StatusCode

from accesstrace.tracing.otel import InstructionIdGenerator
from accesstrace.tracing.translator import translate

from .helpers import make_record

TRACE_ID = int("11" * 16, 16)
SOURCE_SPAN_ID = int("22" * 8, 16)
REQUEST_SPAN_ID = int("33" * 8, 16)


class TestSpanEmitter:
    def test_emits_span_with_instruction_ids_and_timing(
        self, emitter, span_exporter
    ):
        emitter.emit(translate(make_record()))

        (span,) = span_exporter.get_finished_spans()
        assert span.name == "authentication"
        assert span.context.trace_id == TRACE_ID
        assert span.context.span_id == REQUEST_SPAN_ID
        assert span.start_time == 1700000000000 * 1_000_000
        assert span.end_time == 1700000000050 * 1_000_000
        assert span.status.status_code == StatusCode.OK

    def test_source_request_is_parent(self, emitter, span_exporter):
        emitter.emit(translate(make_record()))

        (span,) = span_exporter.get_finished_spans()
        assert span.parent is not None
        assert span.parent.trace_id == TRACE_ID
        assert span.parent.span_id == SOURCE_SPAN_ID

    def test_calls_of_one_source_request_are_distinct_siblings(
        self, emitter, span_exporter
    ):
        emitter.emit(
            translate(make_record(request_id="44444444-4444-4444-4444-444444444444"))
        )
        emitter.emit(
            translate(make_record(request_id="55555555-5555-5555-5555-555555555555"))
        )

        first, second = span_exporter.get_finished_spans()
        assert first.context.span_id != second.context.span_id
        assert first.parent.span_id == second.parent.span_id == SOURCE_SPAN_ID

    def test_record_without_source_request_is_valid_root(
        self, emitter, span_exporter
    ):
        emitter.emit(translate(make_record(source_request_id=None)))

        (span,) = span_exporter.get_finished_spans()
        assert span.parent is None
        assert span.context.is_valid
        assert span.context.trace_id == TRACE_ID
        assert span.context.span_id == REQUEST_SPAN_ID

    def test_anonymous_record_is_root(self, emitter, span_exporter):
        emitter.emit(translate(make_record(user_id=None)))

        (span,) = span_exporter.get_finished_spans()
        assert span.parent is None
        assert span.context.trace_id == 0
        assert span.context.span_id == REQUEST_SPAN_ID

    def test_attributes(self, emitter, span_exporter):
        emitter.emit(translate(make_record(user_id=None)))

        (span,) = span_exporter.get_finished_spans()
        assert span.attributes["userId"] == ""
        assert span.attributes["service"] == "account"
        assert span.attributes["method"] == "authentication"
        assert span.attributes["requestId"] == "33333333-3333-3333-3333-333333333333"

    def test_warning_is_error(self, emitter, span_exporter):
        emitter.emit(translate(make_record(status="warning")))
        (span,) = span_exporter.get_finished_spans()
        assert span.status.status_code == StatusCode.ERROR

    def test_other_status_is_unset(self, emitter, span_exporter):
        emitter.emit(translate(make_record(status="timeout")))
        (span,) = span_exporter.get_finished_spans()
        assert span.status.status_code == StatusCode.UNSET

    def test_same_record_gives_same_ids(self, emitter, span_exporter):
        record = make_record()
        emitter.emit(translate(record))
        emitter.emit(translate(record))
        first, second = span_exporter.get_finished_spans()
        assert first.context.trace_id == second.context.trace_id
        assert first.context.span_id == second.context.span_id


class TestInstructionIdGenerator:
    def test_assigned_ids_inside_scope(self):
        generator = InstructionIdGenerator()
        with generator.assign(5, 7):
            assert generator.generate_trace_id() == 5
            assert generator.generate_span_id() == 7

    def test_random_ids_outside_scope(self):
        generator = InstructionIdGenerator()
        with generator.assign(5, 7):
            pass
        assert generator.generate_trace_id() != 5
        assert generator.generate_span_id() != 7
