"""Clients for the query-execution service."""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol

import requests

from medrecords.config import settings
from medrecords.errors import UpstreamStatusError, UpstreamUnreachableError
from medrecords.logging import log_raw_body
from medrecords.services.body_capture import CapturedBody, capture_response_body

logger = logging.getLogger(__name__)

JSON_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class QueryExecutor(Protocol):
    async def execute(self, body: bytes) -> CapturedBody:
        """Send one serialized query and return the captured success body."""
        ...


class HTTPQueryExecutor:
    """Query executor that POSTs to the query service over HTTP.

    Exactly one request is made per call. A transport failure or timeout
    raises ``UpstreamUnreachableError``; the timeout bounds the whole call,
    including a slowly streamed body. Any status other than 200 raises
    ``UpstreamStatusError`` carrying that status.
    """

    def __init__(self, endpoint: str, timeout_seconds: float):
        self.endpoint = endpoint
        self.timeout_seconds = timeout_seconds

    def _post(self, body: bytes) -> CapturedBody:
        try:
            response = requests.post(
                self.endpoint,
                data=body,
                headers=JSON_HEADERS,
                timeout=self.timeout_seconds,
            )
        except requests.RequestException as exc:
            logger.error("Failed to reach query service at %s: %s", self.endpoint, exc)
            raise UpstreamUnreachableError() from exc

        try:
            captured = capture_response_body(response)
        finally:
            response.close()
        log_raw_body(logger, "Query service response", captured.raw)

        if response.status_code != requests.codes.ok:
            logger.warning(
                "Query service returned HTTP %s for %s",
                response.status_code,
                self.endpoint,
            )
            raise UpstreamStatusError(response.status_code)
        return captured

    async def execute(self, body: bytes) -> CapturedBody:
        # requests only bounds each connect and socket read; this bounds the whole call
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(self._post, body),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as exc:
            logger.error(
                "Query service at %s did not answer within %ss",
                self.endpoint,
                self.timeout_seconds,
            )
            raise UpstreamUnreachableError() from exc


@dataclass
class ExecutedQuery:
    sql: str
    args: list[Any]


@dataclass
class InMemoryQueryExecutor:
    """In-memory executor for tests and local demos.

    Without a configured ``response_body`` it answers like a database that
    assigns sequential ids: ``{"data": [{"id": n}]}``.
    """

    status_code: int = 200
    response_body: Optional[bytes] = None
    error: Optional[Exception] = None
    calls: list[ExecutedQuery] = field(default_factory=list)
    _next_id: int = field(default=1, init=False, repr=False)

    async def execute(self, body: bytes) -> CapturedBody:
        decoded = json.loads(body)
        self.calls.append(ExecutedQuery(sql=decoded["sql"], args=decoded["args"]))

        if self.error is not None:
            raise self.error
        if self.status_code != 200:
            raise UpstreamStatusError(self.status_code)
        if self.response_body is not None:
            return CapturedBody(raw=self.response_body)

        record_id = self._next_id
        self._next_id += 1
        return CapturedBody(raw=json.dumps({"data": [{"id": record_id}]}).encode("utf-8"))

    def clear(self) -> None:
        self.calls.clear()
        self._next_id = 1


def get_query_executor() -> QueryExecutor:
    return HTTPQueryExecutor(
        endpoint=settings.query_service_endpoint,
        timeout_seconds=settings.query_service_timeout_seconds,
    )
