"""Deliver report records to the collector logs endpoint."""

import logging
import platform
from typing import Optional, Sequence

import httpx

from ..version import __version__
from ..config.constants import (
    AGENT_LOG_LEVEL,
    AGENT_TYPE,
    JSON_CONTENT_TYPE,
    LOGS_URL,
    RUNTIME_TYPE,
)
from ..errors import CollectorTransportError, DeliveryError, RequestConstructionError
from ..models import AgentInfo, LogsPayload, ReportLog, RuntimeInfo
from ..utils.logger import null_logger


def build_logs_request(
    secret_key: str,
    records: Sequence[ReportLog],
    logs_url: str = LOGS_URL,
) -> httpx.Request:
    """
    Serialize a batch of records into a collector POST.

    The secret key travels inside the JSON body, not as a header.

    Args:
        secret_key: Account secret key
        records: Records to ship, in order
        logs_url: Collector logs endpoint

    Returns:
        httpx.Request: Ready-to-send request

    Raises:
        RequestConstructionError: If the payload or request cannot be built
    """
    try:
        payload = LogsPayload(
            secret_key=secret_key,
            runtime=RuntimeInfo(
                type=RUNTIME_TYPE,
                version=platform.python_version(),
            ),
            agent=AgentInfo(
                type=AGENT_TYPE,
                version=__version__,
                log_level=AGENT_LOG_LEVEL,
            ),
            logs=list(records),
        )
        body = payload.model_dump_json(by_alias=True)

        return httpx.Request(
            "POST",
            logs_url,
            headers={
                "Accept": JSON_CONTENT_TYPE,
                "Content-Type": JSON_CONTENT_TYPE,
            },
            content=body.encode("utf-8"),
        )
    except (httpx.InvalidURL, ValueError, TypeError) as e:
        raise RequestConstructionError(f"create logs request: {e}") from e


def check_logs_response(response: httpx.Response) -> None:
    """
    Accept only HTTP 200 from the collector.

    Raises:
        DeliveryError: On any other status code
    """
    if response.status_code != 200:
        raise DeliveryError(response.status_code)


class LogShipper:
    """
    Synchronous shipper for report records.

    Sends through the transport it is given, which must be the wrapped
    transport and never the interceptor itself. No retry is attempted.
    """

    def __init__(
        self,
        secret_key: str,
        transport: httpx.BaseTransport,
        logs_url: str = LOGS_URL,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize log shipper.

        Args:
            secret_key: Account secret key embedded in every payload
            transport: Transport used to reach the collector
            logs_url: Collector logs endpoint
            logger: Optional logger instance
        """
        self.secret_key = secret_key
        self.transport = transport
        self.logs_url = logs_url
        self.logger = (logger or null_logger()).getChild(self.__class__.__name__)

    def ship(self, records: Sequence[ReportLog]) -> None:
        """
        POST records to the collector.

        An empty batch succeeds without touching the network.

        Args:
            records: Records to ship, in order

        Raises:
            RequestConstructionError: If the request cannot be built
            CollectorTransportError: If the request cannot complete
            DeliveryError: If the collector does not answer 200
        """
        if not records:
            return

        request = build_logs_request(self.secret_key, records, self.logs_url)

        try:
            response = self.transport.handle_request(request)
        except httpx.HTTPError as e:
            raise CollectorTransportError(f"perform logs request: {e}") from e

        try:
            check_logs_response(response)
        finally:
            response.close()

        self.logger.debug(f"Shipped {len(records)} record(s) to {self.logs_url}")


class AsyncLogShipper:
    """Asyncio counterpart of LogShipper."""

    def __init__(
        self,
        secret_key: str,
        transport: httpx.AsyncBaseTransport,
        logs_url: str = LOGS_URL,
        logger: Optional[logging.Logger] = None,
    ):
        self.secret_key = secret_key
        self.transport = transport
        self.logs_url = logs_url
        self.logger = (logger or null_logger()).getChild(self.__class__.__name__)

    async def ship(self, records: Sequence[ReportLog]) -> None:
        """POST records to the collector. Same contract as LogShipper.ship."""
        if not records:
            return

        request = build_logs_request(self.secret_key, records, self.logs_url)

        try:
            response = await self.transport.handle_async_request(request)
        except httpx.HTTPError as e:
            raise CollectorTransportError(f"perform logs request: {e}") from e

        try:
            check_logs_response(response)
        finally:
            await response.aclose()

        self.logger.debug(f"Shipped {len(records)} record(s) to {self.logs_url}")
