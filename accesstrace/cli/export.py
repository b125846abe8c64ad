"""CLI glue for a one-shot access log export."""

import logging

from accesstrace.config import Config, Method
from accesstrace.exceptions import ConfigurationError
from accesstrace.models import ExportSummary
from accesstrace.store import select_store
from accesstrace.tracing import (
    AccessLogExporter,
    InstructionIdGenerator,
    PageFetcher,
    SpanEmitter,
    check_collector,
    create_tracer_provider,
    setup_otel_exporter,
)
from accesstrace.utils import time_validation

logger = logging.getLogger("accesstrace")


def validate_export(config: Config, begin_time: str, end_time: str) -> None:
    """Check everything that can be checked before touching the network.

    Raises:
        ValidationError: If the time range is malformed
        ConfigurationError: If a required setting is missing
    """
    time_validation(begin_time, end_time)
    if not config.namespace:
        raise ConfigurationError(
            "No log namespace given", "Pass --namespace or set it in the config"
        )
    if config.method == Method.GS2 and not config.gs2_config.client_id:
        raise ConfigurationError(
            "No GS2 client ID given",
            "Pass --client-id or set gs2_config.client_id in the config",
        )
    if config.method == Method.OPENSEARCH and not config.opensearch_config.index:
        raise ConfigurationError(
            "No OpenSearch index given",
            "Set opensearch_config.index in the config",
        )


def run_export(
    config: Config,
    user_id: str | None,
    begin_time: str,
    end_time: str,
) -> ExportSummary:
    """Export the access logs of a time range to the OTLP collector.

    Args:
        config: Configuration with log store and collector settings
        user_id: Optional user filter
        begin_time: RFC 3339 start of the range
        end_time: RFC 3339 end of the range

    Returns:
        Totals of the run
    """
    validate_export(config, begin_time, end_time)

    otel_config = config.otel_config
    logger.info(f"OTLP endpoint: {otel_config.endpoint}")
    check_collector(otel_config.endpoint, otel_config.connect_timeout)

    store = select_store(config)(config)
    fetcher = PageFetcher(
        store,
        config.namespace,
        user_id,
        begin_time,
        end_time,
        config.page_size,
    )

    id_generator = InstructionIdGenerator()
    provider = create_tracer_provider(
        otel_config.service_name,
        setup_otel_exporter(otel_config.endpoint),
        id_generator,
    )
    emitter = SpanEmitter(provider.get_tracer(__name__), id_generator)

    return AccessLogExporter(fetcher, emitter, provider).run()
