"""Pydantic models for report records and collector payloads."""

from typing import Dict, List

import httpx
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .config.constants import REQUEST_END
from .utils.headers import normalize_headers


class ReportLog(BaseModel):
    """One observed request/response exchange, as the collector expects it."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    protocol: str
    path: str
    hostname: str
    method: str
    url: str
    started_at: int  # epoch milliseconds
    ended_at: int  # epoch milliseconds
    type: str = REQUEST_END
    status_code: int
    request_headers: Dict[str, str] = Field(default_factory=dict)
    request_body: str = ""  # body capture not implemented
    response_headers: Dict[str, str] = Field(default_factory=dict)
    response_body: str = ""  # body capture not implemented

    @model_validator(mode="after")
    def ended_after_started(self) -> "ReportLog":
        """Ensure the exchange does not end before it starts."""
        if self.ended_at < self.started_at:
            raise ValueError(
                f"endedAt ({self.ended_at}) is before startedAt ({self.started_at})"
            )
        return self

    @classmethod
    def from_exchange(
        cls,
        request: httpx.Request,
        response: httpx.Response,
        started_at: float,
        ended_at: float,
    ) -> "ReportLog":
        """
        Build a record from a completed exchange.

        Args:
            request: Request handed to the wrapped transport
            response: Response the wrapped transport returned
            started_at: Epoch seconds just before delegating
            ended_at: Epoch seconds just after the delegate returned

        Returns:
            ReportLog: Record with millisecond timestamps and single-valued headers
        """
        return cls(
            protocol=request.url.scheme,
            path=request.url.path,
            hostname=request.url.raw_host.decode("ascii"),
            method=request.method,
            url=str(request.url),
            started_at=int(started_at * 1000),
            ended_at=int(ended_at * 1000),
            status_code=response.status_code,
            request_headers=normalize_headers(request.headers),
            response_headers=normalize_headers(response.headers),
        )


class RemoteConfig(BaseModel):
    """Collector-side configuration. Its shape belongs to the collector."""

    model_config = ConfigDict(extra="allow", frozen=True)


class RuntimeInfo(BaseModel):
    """Language runtime executing the agent."""
    type: str
    version: str


class AgentInfo(BaseModel):
    """Agent identity sent alongside every batch."""
    type: str
    version: str
    log_level: str


class LogsPayload(BaseModel):
    """Body of a POST to the collector logs endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    secret_key: str = Field(alias="secretKey")
    runtime: RuntimeInfo
    agent: AgentInfo
    logs: List[ReportLog]
