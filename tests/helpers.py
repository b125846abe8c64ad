"""Shared builders for the test suite."""

from accesstrace.models import AccessLogRecord, LogPage, LogQuery
from accesstrace.store.base import LogStore

USER_ID = "11111111-1111-1111-1111-111111111111"
SOURCE_REQUEST_ID = "22222222-2222-2222-2222-222222222222"


def make_record(**overrides) -> AccessLogRecord:
    values = dict(
        request_id="33333333-3333-3333-3333-333333333333",
        source_request_id=SOURCE_REQUEST_ID,
        user_id=USER_ID,
        service="account",
        method="authentication",
        request='{"userId": "user-0001"}',
        result='{"token": "xxx"}',
        status="ok",
        timestamp=1700000000000,
        duration=50,
    )
    values.update(overrides)
    return AccessLogRecord(**values)


class StubStore(LogStore):
    """Log store serving a fixed list of pages and recording each query."""

    def __init__(self, pages: list[LogPage]):
        self.pages = list(pages)
        self.queries: list[LogQuery] = []

    def query(self, query: LogQuery) -> LogPage:
        self.queries.append(query)
        return self.pages[len(self.queries) - 1]
