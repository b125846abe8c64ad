from ..config import Config, Method
from .base import LogStore
from .gs2 import Gs2LogStore
from .opensearch import OpenSearchLogStore

STORES: dict[Method, type[LogStore]] = {
    Method.GS2: Gs2LogStore,
    Method.OPENSEARCH: OpenSearchLogStore,
}


def select_store(config: Config) -> type[LogStore]:
    """
    Select the log store class for the configured method.

    Args:
        config: The configuration object

    Returns:
        The LogStore subclass to instantiate
    """
    return STORES[config.method]


__all__ = ["select_store", "LogStore", "Gs2LogStore", "OpenSearchLogStore"]
