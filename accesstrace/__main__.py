import sys

import click

from accesstrace.cli import handle_secrets, print_blue, run_export
from accesstrace.config import Config, Method, load_config
from accesstrace.error_handler import handle_error
from accesstrace.exceptions import ConfigurationError
from accesstrace.log import init_logger, logger
from accesstrace.utils import byte_count_iec


def apply_overrides(config: Config, **overrides) -> None:
    """Copy the CLI options that were given onto the configuration."""
    targets = {
        "method": (config, "method"),
        "namespace": (config, "namespace"),
        "page_size": (config, "page_size"),
        "client_id": (config.gs2_config, "client_id"),
        "region": (config.gs2_config, "region"),
        "host": (config.otel_config, "host"),
        "port": (config.otel_config, "port"),
    }
    for name, value in overrides.items():
        if value is None:
            continue
        target, attr = targets[name]
        if name == "method":
            value = Method(value)
        setattr(target, attr, value)
    if config.page_size <= 0:
        raise ConfigurationError(
            f"Invalid page size: {config.page_size}",
            "Use a positive --page-size",
        )


@click.group()
def cli():
    pass


@cli.command()
@click.option(
    "-c",
    "--config-path",
    "config_path",
    type=click.Path(exists=True),
    required=False,
    help="Path to configuration file",
)
@click.option(
    "--method",
    type=click.Choice([method.value for method in Method]),
    required=False,
    help="The log store to read from",
)
@click.option("--client-id", type=str, required=False, help="GS2 client ID")
@click.option("--secret", type=str, required=False, help="GS2 client secret")
@click.option("--ask-secret", is_flag=True, help="Ask for GS2 client secret")
@click.option("--region", type=str, required=False, help="GS2 region")
@click.option(
    "--namespace", type=str, required=False, help="GS2 log namespace name"
)
@click.option(
    "--opensearch-pass",
    type=str,
    required=False,
    help="The opensearch password",
)
@click.option(
    "--ask-opensearch-pass", is_flag=True, help="Ask for opensearch password"
)
@click.option(
    "--host", type=str, required=False, help="Host name of the collector"
)
@click.option(
    "--port", type=int, required=False, help="Port number of the collector"
)
@click.option(
    "--user", "user_id", type=str, required=False, help="Only export this user"
)
@click.option(
    "--begin",
    type=str,
    required=True,
    help="Log collection begin time (RFC 3339)",
)
@click.option(
    "--end",
    type=str,
    required=True,
    help="Log collection end time (RFC 3339)",
)
@click.option(
    "--page-size", type=int, required=False, help="Records per page query"
)
def export(
    config_path: str | None,
    method: str | None,
    client_id: str | None,
    secret: str | None,
    ask_secret: bool,
    region: str | None,
    namespace: str | None,
    opensearch_pass: str | None,
    ask_opensearch_pass: bool,
    host: str | None,
    port: int | None,
    user_id: str | None,
    begin: str,
    end: str,
    page_size: int | None,
):
    """
    Replay access logs as OpenTelemetry spans.
    """
    try:
        config = load_config(config_path)
        init_logger(config)
        apply_overrides(
            config,
            method=method,
            namespace=namespace,
            page_size=page_size,
            client_id=client_id,
            region=region,
            host=host,
            port=port,
        )
        handle_secrets(
            config, ask_secret, secret, ask_opensearch_pass, opensearch_pass
        )

        logger.info("Running accesstrace...")
        summary = run_export(config, user_id, begin, end)
    except KeyboardInterrupt:
        logger.warning("Interrupted, export is incomplete")
        sys.exit(130)
    except Exception as e:
        handle_error(e, exit_on_error=True)
        return

    print_blue(f"scanSize {byte_count_iec(summary.scan_size)} rows {summary.rows}")


if __name__ == "__main__":
    cli()
