import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

import yaml

from .exceptions import ConfigurationError

DEFAULT_CONFIG_PATH = "config.yaml"
CONFIG_ENV_VAR = "ACCESSTRACE_CONFIG"


class Method(Enum):
    GS2 = "gs2"
    OPENSEARCH = "opensearch"


@dataclass
class Gs2Config:
    client_id: str = ""
    client_secret: str = ""
    region: str = "ap-northeast-1"


@dataclass
class OpenSearchMappingConfig:
    """Field names of the access log documents in the OpenSearch index."""

    timestamp: str = "timestamp"
    request_id: str = "requestId"
    source_request_id: str | None = "sourceRequestId"
    user_id: str | None = "userId"
    service: str = "service"
    method: str = "method"
    request: str = "request"
    result: str = "result"
    status: str = "status"
    duration: str = "duration"
    namespace: str | None = "namespaceName"

    def __post_init__(self):
        for name in ("timestamp", "request_id"):
            if not getattr(self, name):
                raise ValueError(
                    f"Mapping field '{name}' is required for paging"
                )


@dataclass
class OpenSearchConfig:
    host: str = "localhost"
    port: int = 9200
    username: str = ""
    password: str = ""
    use_ssl: bool = False
    verify_certs: bool = False
    index: str = ""
    timeout: int = 30
    mapping: OpenSearchMappingConfig = field(
        default_factory=OpenSearchMappingConfig
    )

    def __post_init__(self):
        if isinstance(self.mapping, dict):
            self.mapping = OpenSearchMappingConfig(**self.mapping)


@dataclass
class OtelConfig:
    host: str = "localhost"
    port: int = 4317
    service_name: str = "gs2"
    connect_timeout: float = 1.0

    @property
    def endpoint(self) -> str:
        return f"{self.host}:{self.port}"


@dataclass
class Config:
    method: Method = Method.GS2
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = (
        "INFO"
    )
    page_size: int = 1000
    namespace: str = ""
    gs2_config: Gs2Config = field(default_factory=Gs2Config)
    opensearch_config: OpenSearchConfig = field(
        default_factory=OpenSearchConfig
    )
    otel_config: OtelConfig = field(default_factory=OtelConfig)

    def __post_init__(self):
        # value checking
        if self.log_level not in [
            "DEBUG",
            "INFO",
            "WARNING",
            "ERROR",
            "CRITICAL",
        ]:
            raise ValueError(f"Invalid log level: {self.log_level}")
        if isinstance(self.method, str):
            if self.method not in [method.value for method in Method]:
                raise ValueError(f"Invalid method: {self.method}")
            self.method = Method(self.method)
        if self.page_size <= 0:
            raise ValueError(f"Invalid page size: {self.page_size}")
        # type checking
        if isinstance(self.gs2_config, dict):
            self.gs2_config = Gs2Config(**self.gs2_config)
        if isinstance(self.opensearch_config, dict):
            self.opensearch_config = OpenSearchConfig(**self.opensearch_config)
        if isinstance(self.otel_config, dict):
            self.otel_config = OtelConfig(**self.otel_config)


def load_config(config_path: str | None = None) -> Config:
    """Load the configuration from a YAML file.

    The path is taken from the argument, then from ACCESSTRACE_CONFIG.
    When neither is set and the default ``config.yaml`` does not exist,
    the defaults are used and the CLI flags supply the rest.

    Raises:
        ConfigurationError: If an explicitly requested file is missing
            or the file contents are invalid.
    """
    explicit = config_path or os.getenv(CONFIG_ENV_VAR)
    path = explicit or DEFAULT_CONFIG_PATH
    if not os.path.exists(path):
        if explicit:
            raise ConfigurationError(
                f"Config file not found: {path}",
                "Check the --config-path option or ACCESSTRACE_CONFIG",
            )
        return Config()
    with open(path) as f:
        config_data = yaml.safe_load(f) or {}
    try:
        return Config(**config_data)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"Error loading config {path}: {e}",
            "Fix the reported value in the configuration file",
        ) from e
