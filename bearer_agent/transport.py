"""httpx transports that report every exchange to the Bearer collector.

Wrap an existing transport and hand the result to an httpx client::

    client = httpx.Client(transport=BearerTransport(secret_key=key))

The wrapped transport's response or exception always reaches the caller
unchanged. Reporting only adds the latency of one collector POST, and a
failed POST ends up as a warning in the configured logger.
"""

import logging
import time
from typing import Optional, Tuple

import httpx

from .config.constants import CONFIG_URL, LOGS_URL
from .config.models import AgentConfig
from .models import RemoteConfig, ReportLog
from .services.config_fetcher import AsyncConfigFetcher, ConfigFetcher
from .services.log_shipper import AsyncLogShipper, LogShipper
from .utils.logger import null_logger


def _clock() -> Tuple[float, float]:
    return time.time(), time.perf_counter()


def _ended_at(started: Tuple[float, float]) -> float:
    """End wall-clock time derived from a monotonic delta, never before the start."""
    wall, mono = started
    return wall + (time.perf_counter() - mono)


class BearerTransport(httpx.BaseTransport):
    """
    Synchronous reporting transport.

    With an empty secret key this is a pure passthrough. Configuration is
    fixed at construction, so one instance may be shared across threads.
    """

    def __init__(
        self,
        secret_key: str = "",
        logger: Optional[logging.Logger] = None,
        transport: Optional[httpx.BaseTransport] = None,
        logs_url: str = LOGS_URL,
        config_url: str = CONFIG_URL,
    ):
        """
        Initialize reporting transport.

        Args:
            secret_key: Account secret key; empty disables reporting
            logger: Optional logger for delivery warnings (defaults to a no-op sink)
            transport: Transport to wrap (defaults to httpx.HTTPTransport)
            logs_url: Collector logs endpoint
            config_url: Collector config endpoint
        """
        self.secret_key = secret_key
        self.logger = logger or null_logger()
        self.transport = transport or httpx.HTTPTransport()
        # Collector calls go through the wrapped transport so they are never reported
        self.shipper = LogShipper(secret_key, self.transport, logs_url, self.logger)
        self.fetcher = ConfigFetcher(secret_key, self.transport, config_url, self.logger)

    @classmethod
    def from_config(
        cls,
        config: AgentConfig,
        logger: Optional[logging.Logger] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "BearerTransport":
        return cls(
            secret_key=config.secret_key,
            logger=logger,
            transport=transport,
            logs_url=config.logs_url,
            config_url=config.config_url,
        )

    @property
    def reporting_enabled(self) -> bool:
        return bool(self.secret_key)

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        """
        Delegate the request and report the exchange.

        Exceptions from the wrapped transport propagate untouched and
        nothing is reported for them.
        """
        started = _clock()
        response = self.transport.handle_request(request)
        ended_at = _ended_at(started)

        if not self.reporting_enabled:
            return response

        try:
            record = ReportLog.from_exchange(request, response, started[0], ended_at)
            self.shipper.ship([record])
        except Exception as e:
            self.logger.warning(
                f"log records: {e}",
                extra={"error_type": type(e).__name__, "url": str(request.url)}
            )

        return response

    def config(self) -> RemoteConfig:
        """Fetch the remote configuration for this secret key."""
        return self.fetcher.fetch()

    def close(self) -> None:
        self.transport.close()


class AsyncBearerTransport(httpx.AsyncBaseTransport):
    """Asyncio reporting transport. Same guarantees as BearerTransport."""

    def __init__(
        self,
        secret_key: str = "",
        logger: Optional[logging.Logger] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logs_url: str = LOGS_URL,
        config_url: str = CONFIG_URL,
    ):
        self.secret_key = secret_key
        self.logger = logger or null_logger()
        self.transport = transport or httpx.AsyncHTTPTransport()
        self.shipper = AsyncLogShipper(secret_key, self.transport, logs_url, self.logger)
        self.fetcher = AsyncConfigFetcher(secret_key, self.transport, config_url, self.logger)

    @classmethod
    def from_config(
        cls,
        config: AgentConfig,
        logger: Optional[logging.Logger] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "AsyncBearerTransport":
        return cls(
            secret_key=config.secret_key,
            logger=logger,
            transport=transport,
            logs_url=config.logs_url,
            config_url=config.config_url,
        )

    @property
    def reporting_enabled(self) -> bool:
        return bool(self.secret_key)

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        started = _clock()
        response = await self.transport.handle_async_request(request)
        ended_at = _ended_at(started)

        if not self.reporting_enabled:
            return response

        try:
            record = ReportLog.from_exchange(request, response, started[0], ended_at)
            await self.shipper.ship([record])
        except Exception as e:
            self.logger.warning(
                f"log records: {e}",
                extra={"error_type": type(e).__name__, "url": str(request.url)}
            )

        return response

    async def config(self) -> RemoteConfig:
        """Fetch the remote configuration for this secret key."""
        return await self.fetcher.fetch()

    async def aclose(self) -> None:
        await self.transport.aclose()
