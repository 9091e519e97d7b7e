"""Read a payload to completion once and replay it for every later reader."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass

import requests
from starlette.requests import ClientDisconnect, Request

from medrecords.errors import IOReadError, UpstreamUnreachableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CapturedBody:
    """Buffered copy of an HTTP body."""

    raw: bytes

    def stream(self) -> io.BytesIO:
        """Fresh replay of the captured bytes, positioned at the start."""
        return io.BytesIO(self.raw)

    def text(self) -> str:
        return self.raw.decode("utf-8", errors="replace")

    def __len__(self) -> int:
        return len(self.raw)


async def capture_request_body(request: Request) -> CapturedBody:
    """Buffer the inbound body.

    Starlette keeps the buffered bytes on the request, so any later
    ``request.body()`` or ``request.stream()`` call sees the same content.
    """
    try:
        raw = await request.body()
    except (ClientDisconnect, RuntimeError, OSError) as exc:
        logger.warning("Failed to read request body: %s", exc)
        raise IOReadError() from exc
    return CapturedBody(raw=raw)


def capture_response_body(response: requests.Response) -> CapturedBody:
    """Buffer an upstream response body before anything decodes it."""
    try:
        raw = response.content
    except requests.RequestException as exc:
        logger.error("Failed to read query service response body: %s", exc)
        raise UpstreamUnreachableError() from exc
    return CapturedBody(raw=raw or b"")
