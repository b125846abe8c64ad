"""Tests for trace and span ID derivation."""

import pytest

from accesstrace.exceptions import RecordError
from accesstrace.tracing.ids import (
    derive_request_span_id,
    derive_span_id,
    derive_trace_id,
    id_to_int,
)


class TestDeriveTraceId:
    def test_uuid_bytes_are_used_verbatim(self):
        trace_id = derive_trace_id("11111111-1111-1111-1111-111111111111")
        assert trace_id == b"\x11" * 16

    def test_is_deterministic(self):
        user_id = "0f8fad5b-d9cb-469f-a165-70867728950e"
        assert derive_trace_id(user_id) == derive_trace_id(user_id)
        assert len(derive_trace_id(user_id)) == 16

    def test_distinct_users_get_distinct_traces(self):
        assert derive_trace_id(
            "0f8fad5b-d9cb-469f-a165-70867728950e"
        ) != derive_trace_id("7c9e6679-7425-40de-944b-e07fc1f90ae7")

    @pytest.mark.parametrize("user_id", [None, ""])
    def test_missing_user_gives_zero_id(self, user_id):
        assert derive_trace_id(user_id) == bytes(16)

    def test_malformed_user_id_raises(self):
        with pytest.raises(RecordError, match="userId"):
            derive_trace_id("user-0001")

    def test_non_string_user_id_raises(self):
        with pytest.raises(RecordError, match="userId"):
            derive_trace_id(12345)


class TestDeriveSpanId:
    def test_first_eight_bytes_of_uuid(self):
        span_id = derive_span_id("00112233-4455-6677-8899-aabbccddeeff")
        assert span_id == bytes.fromhex("0011223344556677")

    @pytest.mark.parametrize("source_request_id", [None, ""])
    def test_missing_source_request_gives_zero_id(self, source_request_id):
        assert derive_span_id(source_request_id) == bytes(8)

    def test_malformed_source_request_id_raises(self):
        with pytest.raises(RecordError, match="sourceRequestId"):
            derive_span_id("not-a-uuid")


class TestDeriveRequestSpanId:
    def test_first_eight_bytes_of_uuid(self):
        span_id = derive_request_span_id("00112233-4455-6677-8899-aabbccddeeff")
        assert span_id == bytes.fromhex("0011223344556677")

    def test_distinct_requests_get_distinct_spans(self):
        assert derive_request_span_id(
            "44444444-4444-4444-4444-444444444444"
        ) != derive_request_span_id("55555555-5555-5555-5555-555555555555")

    @pytest.mark.parametrize("request_id", ["", "req-1"])
    def test_malformed_request_id_raises(self, request_id):
        with pytest.raises(RecordError, match="requestId"):
            derive_request_span_id(request_id)


def test_id_to_int_is_big_endian():
    assert id_to_int(bytes.fromhex("0000000000000102")) == 258
    assert id_to_int(bytes(16)) == 0
