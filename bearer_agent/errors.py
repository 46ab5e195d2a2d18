"""Exceptions raised by the collector side channel.

None of these ever reach the caller of an intercepted request: the
interceptor logs them and returns the wrapped transport's response.
They are raised to whoever calls the shipper or the config fetcher
directly.
"""

from typing import Optional


class BearerError(Exception):
    """Base class for all agent errors."""


class RequestConstructionError(BearerError):
    """A request to the collector could not be built or serialized."""


class CollectorTransportError(BearerError):
    """A request to the collector could not complete."""


class DeliveryError(BearerError):
    """The collector answered with an unexpected status code."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(message or f"unsupported status code: {status_code}")


class ConfigDeserializationError(BearerError):
    """The collector config response is not a JSON object."""
