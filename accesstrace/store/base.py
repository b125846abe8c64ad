"""Base classes for access log stores in the accesstrace application.

This module defines the abstract base class for all log stores,
providing a common interface for paginated access log queries.
"""

from abc import ABC, abstractmethod

from accesstrace.config import Config
from accesstrace.models import LogPage, LogQuery


class LogStore(ABC):
    """Abstract base class for paginated access log retrieval.

    Implementations connect in ``__init__`` so that connection problems
    surface before the first query.
    """

    @abstractmethod
    def __init__(self, config: Config):
        """Initialize the log store from the configuration.

        Args:
            config (Config): Configuration object containing connection settings.
        """

    @abstractmethod
    def query(self, query: LogQuery) -> LogPage:
        """Fetch one page of access logs.

        Args:
            query (LogQuery): The time range, filters and cursor of the page.

        Returns:
            LogPage: The records of the page, the page's scan size, the total
                count reported by the store and the cursor of the next page,
                which is None on the last page.
        """
