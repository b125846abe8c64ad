"""Cursor-driven retrieval of access logs from a log store."""

import logging
from typing import Iterator

from accesstrace.models import AccessLogRecord, LogQuery
from accesstrace.store.base import LogStore
from accesstrace.utils import rfc3339_to_millis

logger = logging.getLogger("accesstrace")


class PageFetcher:
    """Drains a paginated access log query page by page.

    Iterating the fetcher yields every record exactly once, in the order
    the store returns them. While iterating it keeps the run totals:
    ``scan_size`` is summed over pages and ``rows`` is the total count
    reported by the latest page.

    Example:
        >>> fetcher = PageFetcher(store, "namespace-0001", None,
        ...                       "2024-01-01T00:00:00Z",
        ...                       "2024-01-02T00:00:00Z")
        >>> for record in fetcher:
        ...     handle(record)
        >>> fetcher.scan_size, fetcher.rows
    """

    def __init__(
        self,
        store: LogStore,
        namespace: str,
        user_id: str | None,
        begin_time: str,
        end_time: str,
        page_size: int = 1000,
    ):
        """Initialize the fetcher.

        The time bounds are parsed here so a bad value fails before any
        request is made.

        Args:
            store: The log store to query
            namespace: The log namespace name
            user_id: Optional user filter, empty means all users
            begin_time: Start of the range as an RFC 3339 string
            end_time: End of the range as an RFC 3339 string
            page_size: Number of records requested per page

        Raises:
            ValidationError: If a time bound is not RFC 3339
        """
        self.store = store
        self.namespace = namespace
        self.user_id = user_id or None
        self.begin = rfc3339_to_millis(begin_time)
        self.end = rfc3339_to_millis(end_time)
        self.page_size = page_size

        self.scan_size = 0
        self.rows = 0
        self.pages = 0

    def __iter__(self) -> Iterator[AccessLogRecord]:
        page_token: str | None = None
        while True:
            page = self.store.query(
                LogQuery(
                    namespace=self.namespace,
                    user_id=self.user_id,
                    begin=self.begin,
                    end=self.end,
                    page_token=page_token,
                    limit=self.page_size,
                )
            )
            self.pages += 1
            logger.debug(
                f"Page {self.pages}: {len(page.items)} records, "
                f"scan size {page.scan_size}, total {page.total_count}"
            )

            yield from page.items

            self.scan_size += page.scan_size
            self.rows = page.total_count

            if page.next_page_token is None:
                return
            page_token = page.next_page_token
