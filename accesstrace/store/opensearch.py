"""OpenSearch log store for the accesstrace application.

This module provides paginated access to access logs that have been
shipped into an OpenSearch index.
"""

import json

import urllib3
from opensearchpy import OpenSearch as OpenSearchClient
from opensearchpy.exceptions import AuthenticationException
from opensearchpy.exceptions import ConnectionError as OSConnectionError
from opensearchpy.exceptions import TransportError

from accesstrace.config import Config
from accesstrace.exceptions import LogStoreConnectionError, LogStoreQueryError
from accesstrace.log import logger
from accesstrace.models import AccessLogRecord, LogPage, LogQuery
from accesstrace.store.base import LogStore

urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)


class OpenSearchLogStore(LogStore):
    """
    Access log store backed by an OpenSearch index.

    Pages are sorted by timestamp and request ID and continued with
    ``search_after``; the page token is the JSON-encoded sort values of the
    last hit. The scan size of a page is the byte size of the returned
    document sources.

    Attributes:
        config (OpenSearchConfig): Connection and index settings.
        mapping (OpenSearchMappingConfig): Document field names.
    """

    def __init__(self, config: Config):
        """
        Initialize the OpenSearch log store.

        Args:
            config (Config): Configuration object.

        Raises:
            LogStoreConnectionError: If OpenSearch cannot be reached.
        """

        self.config = config.opensearch_config
        self.mapping = self.config.mapping

        try:
            logger.debug(
                f"Connecting to OpenSearch at {self.config.host}:{self.config.port}"
            )
            self.client = OpenSearchClient(
                hosts=[{"host": self.config.host, "port": self.config.port}],
                http_auth=(
                    (self.config.username, self.config.password)
                    if self.config.username
                    else None
                ),
                use_ssl=self.config.use_ssl,
                verify_certs=self.config.verify_certs,
                timeout=self.config.timeout,
            )
            # Test the connection
            self.client.info()
            logger.info(
                f"Successfully connected to OpenSearch at {self.config.host}"
            )
        except AuthenticationException as e:
            raise LogStoreConnectionError(
                f"Authentication failed for OpenSearch at {self.config.host}",
                "Check your OpenSearch username and password in the configuration",
            ) from e
        except OSConnectionError as e:
            raise LogStoreConnectionError(
                f"Cannot connect to OpenSearch at {self.config.host}:{self.config.port}",
                "Verify the host and port are correct and OpenSearch is running",
            ) from e
        except Exception as e:
            raise LogStoreConnectionError(
                f"Failed to initialize OpenSearch connection: {e}",
                "Check your OpenSearch configuration settings",
            ) from e

    def _build_query(self, query: LogQuery) -> dict:
        filters: list[dict] = [
            {
                "range": {
                    self.mapping.timestamp: {
                        "gte": query.begin,
                        "lte": query.end,
                        "format": "epoch_millis",
                    }
                }
            }
        ]
        if self.mapping.namespace:
            filters.append({"term": {self.mapping.namespace: query.namespace}})
        if query.user_id and self.mapping.user_id:
            filters.append({"term": {self.mapping.user_id: query.user_id}})

        body: dict = {
            "query": {"bool": {"filter": filters}},
            "sort": [
                {self.mapping.timestamp: "asc"},
                {self.mapping.request_id: "asc"},
            ],
            "size": query.limit,
            "track_total_hits": True,
        }
        if query.page_token:
            try:
                body["search_after"] = json.loads(query.page_token)
            except json.JSONDecodeError as e:
                raise LogStoreQueryError(
                    f"Invalid page token: {query.page_token}"
                ) from e
        return body

    def _to_record(self, source: dict) -> AccessLogRecord:
        mapping = self.mapping
        return AccessLogRecord(
            request_id=source.get(mapping.request_id),
            source_request_id=(
                source.get(mapping.source_request_id)
                if mapping.source_request_id
                else None
            ),
            user_id=source.get(mapping.user_id) if mapping.user_id else None,
            service=source.get(mapping.service),
            method=source.get(mapping.method),
            request=source.get(mapping.request),
            result=source.get(mapping.result),
            status=source.get(mapping.status),
            timestamp=source.get(mapping.timestamp),
            duration=source.get(mapping.duration),
        )

    def query(self, query: LogQuery) -> LogPage:
        """
        Fetch one page of access logs from the configured index.

        Args:
            query (LogQuery): Namespace, range, user filter and cursor.

        Returns:
            LogPage: The page of records. The next page token is None once
                a page comes back shorter than the requested limit.

        Raises:
            LogStoreQueryError: If the search fails or returns an
                unexpected structure.
        """
        body = self._build_query(query)
        logger.debug(f"OpenSearch query: {body}")

        try:
            search_results = self.client.search(
                index=self.config.index,
                body=body,
            )
        except OSConnectionError as e:
            raise LogStoreConnectionError(
                f"Lost connection to OpenSearch during query: {e}",
                "Check network connectivity to OpenSearch",
            ) from e
        except TransportError as e:
            if e.status_code == 404:
                raise LogStoreQueryError(
                    f"Index not found: {self.config.index}",
                    "Check that the index name in your configuration is correct",
                ) from e
            elif e.status_code == 403:
                raise LogStoreQueryError(
                    f"Access denied to index: {self.config.index}",
                    "Check that your OpenSearch user has permission to access this index",
                ) from e
            else:
                raise LogStoreQueryError(
                    f"OpenSearch query failed with status {e.status_code}: {e}",
                    "Check the OpenSearch server logs for more details",
                ) from e

        try:
            hits = search_results["hits"]["hits"]
            total = search_results["hits"]["total"]
            total_count = total["value"] if isinstance(total, dict) else total
            items = [self._to_record(hit["_source"]) for hit in hits]
            scan_size = sum(
                len(json.dumps(hit["_source"]).encode()) for hit in hits
            )
            next_page_token = (
                json.dumps(hits[-1]["sort"])
                if hits and len(hits) >= query.limit
                else None
            )
        except (KeyError, TypeError) as e:
            raise LogStoreQueryError(
                f"Failed to parse OpenSearch results: {e}",
                "The log format from OpenSearch may not match the expected structure",
            ) from e

        logger.debug(f"Retrieved {len(items)} access logs from OpenSearch")
        return LogPage(
            items=items,
            scan_size=scan_size,
            total_count=total_count,
            next_page_token=next_page_token,
        )
