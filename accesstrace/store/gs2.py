"""GS2 log store for the accesstrace application.

This module queries the access logs with telemetry that the GS2 log
service records for a namespace.
"""

from gs2 import core
from gs2 import log as gs2_log

from accesstrace.config import Config
from accesstrace.exceptions import LogStoreConnectionError, LogStoreQueryError
from accesstrace.log import logger
from accesstrace.models import AccessLogRecord, LogPage, LogQuery
from accesstrace.store.base import LogStore


def _to_record(item) -> AccessLogRecord:
    return AccessLogRecord(
        request_id=item.request_id,
        source_request_id=item.source_request_id,
        user_id=item.user_id,
        service=item.service,
        method=item.method,
        request=item.request,
        result=item.result,
        status=item.status,
        timestamp=item.timestamp,
        duration=item.duration,
    )


class Gs2LogStore(LogStore):
    """
    Access log store backed by the GS2 log service.

    Attributes:
        config (Gs2Config): Credentials and region of the GS2 project.
        client (Gs2LogRestClient): The authenticated REST client.
    """

    def __init__(self, config: Config):
        """
        Open a session against GS2.

        Args:
            config (Config): Configuration object.

        Raises:
            LogStoreConnectionError: If the session cannot be established.
        """
        self.config = config.gs2_config

        try:
            logger.debug(f"Connecting to GS2 in region {self.config.region}")
            session = core.Gs2RestSession(
                core.BasicGs2Credential(
                    self.config.client_id,
                    self.config.client_secret,
                ),
                self.config.region,
            )
            session.connect()
            logger.info(
                f"Successfully connected to GS2 in region {self.config.region}"
            )
        except Exception as e:
            raise LogStoreConnectionError(
                f"Cannot connect to GS2 in region {self.config.region}: {e}",
                "Check the client ID, client secret and region",
            ) from e

        self.client = gs2_log.Gs2LogRestClient(session)

    def query(self, query: LogQuery) -> LogPage:
        """
        Fetch one page of access logs with telemetry.

        Args:
            query (LogQuery): Namespace, range, user filter and cursor.

        Returns:
            LogPage: The page of records.

        Raises:
            LogStoreQueryError: If the request fails.
        """
        request = (
            gs2_log.QueryAccessLogWithTelemetryRequest()
            .with_namespace_name(query.namespace)
            .with_user_id(query.user_id)
            .with_begin(query.begin)
            .with_end(query.end)
            .with_page_token(query.page_token)
            .with_limit(query.limit)
        )
        try:
            result = self.client.query_access_log_with_telemetry(request)
        except Exception as e:
            logger.debug(f"GS2 query error details: {e}", exc_info=True)
            raise LogStoreQueryError(
                f"Failed to query access logs of namespace {query.namespace}: {e}",
                "Check the namespace name and the permissions of the client",
            ) from e

        return LogPage(
            items=[_to_record(item) for item in result.items or []],
            scan_size=result.scan_size or 0,
            total_count=result.total_count or 0,
            next_page_token=result.next_page_token,
        )
