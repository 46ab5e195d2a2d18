"""Shared pytest configuration and fixtures."""

import json
import logging
import time
from typing import List, Optional
from unittest.mock import Mock

import httpx
import pytest

from bearer_agent.models import ReportLog


SECRET_KEY = "sk_test_123"
APP_URL = "https://api.example.com/sample"
APP_BODY = b"200 OK" + b"Hello World!"


class FakeNetwork:
    """
    Stand-in for the internet behind an httpx.MockTransport.

    Requests to the collector hosts are recorded separately from
    application requests so tests can count delivery attempts.
    """

    def __init__(
        self,
        collector_status: int = 200,
        config_body: bytes = b'{"rules": []}',
        app_error: Optional[Exception] = None,
        collector_error: Optional[Exception] = None,
    ):
        self.collector_status = collector_status
        self.config_body = config_body
        self.app_error = app_error
        self.collector_error = collector_error
        self.app_requests: List[httpx.Request] = []
        self.log_requests: List[httpx.Request] = []
        self.config_requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        host = request.url.host

        if host == "agent.bearer.sh":
            self.log_requests.append(request)
            if self.collector_error:
                raise self.collector_error
            return httpx.Response(self.collector_status, json={"ok": True})

        if host == "config.bearer.sh":
            self.config_requests.append(request)
            if self.collector_error:
                raise self.collector_error
            return httpx.Response(200, content=self.config_body)

        self.app_requests.append(request)
        if self.app_error:
            raise self.app_error
        return httpx.Response(200, headers={"Hello": "World"}, content=APP_BODY)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def log_payloads(self) -> List[dict]:
        """Decoded JSON bodies of every logs POST."""
        return [json.loads(request.content) for request in self.log_requests]


@pytest.fixture
def network():
    """Fake network answering 200 everywhere."""
    return FakeNetwork()


@pytest.fixture
def mock_logger():
    """Logger double for asserting warnings."""
    logger = Mock(spec=logging.Logger)
    logger.getChild.return_value = Mock(spec=logging.Logger)
    return logger


@pytest.fixture
def sample_record():
    """A record for GET https://api.example.com/sample that took 80ms."""
    now_ms = int(time.time() * 1000)
    return ReportLog(
        protocol="https",
        path="/sample",
        hostname="api.example.com",
        method="GET",
        started_at=now_ms - 80,
        ended_at=now_ms,
        status_code=200,
        url="https://api.example.com/sample",
        request_headers={"Accept": "application/json"},
        request_body='{"body":"data"}',
        response_headers={"Content-Type": "application/json"},
        response_body='{"ok":true}',
    )


@pytest.fixture
def network_factory():
    """Build a FakeNetwork with custom collector or application behaviour."""
    return FakeNetwork


@pytest.fixture
def secret_key():
    return SECRET_KEY


@pytest.fixture
def app_url():
    return APP_URL


@pytest.fixture
def app_body():
    return APP_BODY
