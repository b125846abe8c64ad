"""Tests for the fetch, translate and emit loop."""

from unittest.mock import MagicMock

import pytest

from accesstrace.exceptions import LogStoreQueryError, RecordError
from accesstrace.models import LogPage
from accesstrace.tracing.exporter import AccessLogExporter
from accesstrace.tracing.fetcher import PageFetcher

from .helpers import StubStore, make_record


def make_exporter(pages, emitter, provider):
    fetcher = PageFetcher(
        StubStore(pages),
        "namespace-0001",
        None,
        "2023-11-14T00:00:00Z",
        "2023-11-15T00:00:00Z",
        page_size=3,
    )
    return AccessLogExporter(fetcher, emitter, provider)


class TestAccessLogExporter:
    def test_emits_one_span_per_record_in_order(
        self, emitter, provider, span_exporter
    ):
        methods = [f"method{i}" for i in range(7)]
        records = [make_record(method=m) for m in methods]
        pages = [
            LogPage(records[0:3], scan_size=1024, total_count=3, next_page_token="a"),
            LogPage(records[3:6], scan_size=2048, total_count=6, next_page_token="b"),
            LogPage(records[6:7], scan_size=512, total_count=7),
        ]

        summary = make_exporter(pages, emitter, provider).run()

        spans = span_exporter.get_finished_spans()
        assert [span.name for span in spans] == methods
        assert summary.spans == 7
        assert summary.pages == 3
        assert summary.scan_size == 3584
        assert summary.rows == 7

    def test_provider_is_shut_down_once(self, emitter):
        provider = MagicMock()
        make_exporter([LogPage([make_record()], total_count=1)], emitter, provider).run()
        provider.shutdown.assert_called_once_with()

    def test_record_error_aborts_and_still_shuts_down(
        self, emitter, span_exporter
    ):
        provider = MagicMock()
        pages = [
            LogPage(
                [make_record(method="first"), make_record(user_id="bad")],
                total_count=2,
            )
        ]
        with pytest.raises(RecordError):
            make_exporter(pages, emitter, provider).run()

        assert [s.name for s in span_exporter.get_finished_spans()] == ["first"]
        provider.shutdown.assert_called_once_with()

    def test_page_error_aborts(self, emitter):
        provider = MagicMock()
        fetcher = MagicMock(spec=PageFetcher)
        fetcher.namespace = "namespace-0001"
        fetcher.__iter__.side_effect = LogStoreQueryError("page failed")

        with pytest.raises(LogStoreQueryError):
            AccessLogExporter(fetcher, emitter, provider).run()
        provider.shutdown.assert_called_once_with()
