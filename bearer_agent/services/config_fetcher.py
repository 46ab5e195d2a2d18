"""Fetch the collector-side configuration for a secret key."""

import json
import logging
from typing import Optional

import httpx

from ..config.constants import CONFIG_URL, JSON_CONTENT_TYPE
from ..errors import (
    CollectorTransportError,
    ConfigDeserializationError,
    RequestConstructionError,
)
from ..models import RemoteConfig
from ..utils.logger import null_logger


def build_config_request(secret_key: str, config_url: str = CONFIG_URL) -> httpx.Request:
    """
    Build the authenticated GET for the config endpoint.

    Raises:
        RequestConstructionError: If the request cannot be built
    """
    try:
        return httpx.Request(
            "GET",
            config_url,
            headers={
                "Accept": JSON_CONTENT_TYPE,
                "Authorization": secret_key,
            },
        )
    except (httpx.InvalidURL, ValueError, TypeError) as e:
        raise RequestConstructionError(f"create config request: {e}") from e


def parse_config(body: bytes) -> RemoteConfig:
    """
    Deserialize a config response body.

    The status code is not inspected; an error page simply fails to parse.

    Raises:
        ConfigDeserializationError: If the body is not a JSON object
    """
    try:
        return RemoteConfig.model_validate(json.loads(body))
    except ValueError as e:
        raise ConfigDeserializationError(f"parse config response: {e}") from e


class ConfigFetcher:
    """
    Synchronous client for the collector config endpoint.

    Independent from interception: the interceptor never consults the
    fetched configuration when deciding what to report.
    """

    def __init__(
        self,
        secret_key: str,
        transport: httpx.BaseTransport,
        config_url: str = CONFIG_URL,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize config fetcher.

        Args:
            secret_key: Account secret key sent as the Authorization header
            transport: Transport used to reach the collector
            config_url: Collector config endpoint
            logger: Optional logger instance
        """
        self.secret_key = secret_key
        self.transport = transport
        self.config_url = config_url
        self.logger = (logger or null_logger()).getChild(self.__class__.__name__)

    def fetch(self) -> RemoteConfig:
        """
        GET and deserialize the remote configuration.

        Returns:
            RemoteConfig: Parsed configuration

        Raises:
            RequestConstructionError: If the request cannot be built
            CollectorTransportError: If the call or body read cannot complete
            ConfigDeserializationError: If the body is not a JSON object
        """
        request = build_config_request(self.secret_key, self.config_url)

        try:
            response = self.transport.handle_request(request)
            try:
                body = response.read()
            finally:
                response.close()
        except httpx.HTTPError as e:
            raise CollectorTransportError(f"perform config request: {e}") from e

        self.logger.debug(f"Config response status {response.status_code}")
        return parse_config(body)


class AsyncConfigFetcher:
    """Asyncio counterpart of ConfigFetcher."""

    def __init__(
        self,
        secret_key: str,
        transport: httpx.AsyncBaseTransport,
        config_url: str = CONFIG_URL,
        logger: Optional[logging.Logger] = None,
    ):
        self.secret_key = secret_key
        self.transport = transport
        self.config_url = config_url
        self.logger = (logger or null_logger()).getChild(self.__class__.__name__)

    async def fetch(self) -> RemoteConfig:
        """GET and deserialize the remote configuration."""
        request = build_config_request(self.secret_key, self.config_url)

        try:
            response = await self.transport.handle_async_request(request)
            try:
                body = await response.aread()
            finally:
                await response.aclose()
        except httpx.HTTPError as e:
            raise CollectorTransportError(f"perform config request: {e}") from e

        self.logger.debug(f"Config response status {response.status_code}")
        return parse_config(body)
