"""Pull the generated record id out of a query service result."""

from __future__ import annotations

import json
import logging
from typing import Any

from medrecords.errors import (
    MalformedRowError,
    MissingIdentifierError,
    MissingResultDataError,
    ResponseDecodeError,
)
from medrecords.services.body_capture import CapturedBody

logger = logging.getLogger(__name__)


def decode_query_response(body: CapturedBody) -> dict[str, Any]:
    try:
        decoded = json.load(body.stream())
    except (ValueError, RecursionError) as exc:
        logger.error("Failed to decode query service response: %s", exc)
        raise ResponseDecodeError() from exc

    if not isinstance(decoded, dict):
        logger.error("Query service response is a %s, expected an object", type(decoded).__name__)
        raise ResponseDecodeError()
    return decoded


def extract_record_id(body: CapturedBody) -> Any:
    """Return ``data[0]["id"]`` from a query service response.

    Expected shape: ``{"data": [{"id": <value>, ...}, ...], ...}``.
    """
    response = decode_query_response(body)

    rows = response.get("data")
    if not isinstance(rows, list) or not rows:
        logger.error("Query service response has no result rows")
        raise MissingResultDataError()

    first_row = rows[0]
    if not isinstance(first_row, dict):
        logger.error("First result row is a %s, expected an object", type(first_row).__name__)
        raise MalformedRowError()

    if "id" not in first_row:
        logger.error("First result row has no id column: %s", sorted(first_row))
        raise MissingIdentifierError()
    return first_row["id"]
