"""Report outbound HTTP exchanges to the Bearer collector."""

from .config import AgentConfig, ConfigLoader, Settings
from .errors import (
    BearerError,
    CollectorTransportError,
    ConfigDeserializationError,
    DeliveryError,
    RequestConstructionError,
)
from .models import RemoteConfig, ReportLog
from .services.config_fetcher import AsyncConfigFetcher, ConfigFetcher
from .services.log_shipper import AsyncLogShipper, LogShipper
from .transport import AsyncBearerTransport, BearerTransport
from .utils.headers import normalize_headers
from .version import __version__

__all__ = [
    "AgentConfig",
    "AsyncBearerTransport",
    "AsyncConfigFetcher",
    "AsyncLogShipper",
    "BearerError",
    "BearerTransport",
    "CollectorTransportError",
    "ConfigDeserializationError",
    "ConfigFetcher",
    "ConfigLoader",
    "DeliveryError",
    "LogShipper",
    "RemoteConfig",
    "ReportLog",
    "RequestConstructionError",
    "Settings",
    "normalize_headers",
    "__version__",
]
