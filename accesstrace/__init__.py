from .config import Config, load_config
from .models import AccessLogRecord, ExportSummary, SpanInstruction, SpanStatus
from .store import select_store
from .tracing import AccessLogExporter, PageFetcher, translate

__all__ = [
    # Config
    "Config",
    "load_config",
    # Models
    "AccessLogRecord",
    "SpanInstruction",
    "SpanStatus",
    "ExportSummary",
    # Store
    "select_store",
    # Tracing
    "AccessLogExporter",
    "PageFetcher",
    "translate",
]
