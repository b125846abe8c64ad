"""Secret handling utilities for CLI."""

import getpass
import logging

from accesstrace.config import Config, Method

logger = logging.getLogger("accesstrace")


def prompt_password(
    prompt: str, ask: bool, provided: str | None
) -> str | None:
    """
    Prompt for password if asked, otherwise return provided value.

    Args:
        prompt: The prompt message to display.
        ask: Whether to prompt for password.
        provided: The pre-provided password value.

    Returns:
        The password string or None.
    """
    if ask:
        return getpass.getpass(prompt=prompt)
    return provided


def handle_secrets(
    config: Config,
    ask_secret: bool,
    secret: str | None,
    ask_opensearch_pass: bool,
    opensearch_pass: str | None,
) -> None:
    """
    Handle secret input and assignment for the configured log store.

    Prompts the user if requested, assigns the value to the config and
    warns when no secret is available.

    Args:
        config: The configuration object containing connection settings.
        ask_secret: Whether to prompt for the GS2 client secret.
        secret: The GS2 client secret (may be None).
        ask_opensearch_pass: Whether to prompt for OpenSearch password.
        opensearch_pass: The OpenSearch password (may be None).
    """
    if config.method == Method.GS2:
        secret = prompt_password("Enter client secret: ", ask_secret, secret)
        config.gs2_config.client_secret = (
            secret or config.gs2_config.client_secret
        )
        if not config.gs2_config.client_secret:
            logger.warning("Empty GS2 client secret")

    elif config.method == Method.OPENSEARCH:
        opensearch_pass = prompt_password(
            "Enter opensearch password: ", ask_opensearch_pass, opensearch_pass
        )
        config.opensearch_config.password = (
            opensearch_pass or config.opensearch_config.password
        )
        if not config.opensearch_config.password:
            logger.warning(
                "Empty opensearch password - no password will be used for opensearch"
            )
