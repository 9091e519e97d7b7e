"""Decode and check inbound create-record requests."""

from __future__ import annotations

import json
import logging
from typing import Any

from medrecords.errors import InvalidPayloadError, MissingFieldError
from medrecords.services.body_capture import CapturedBody

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("description", "id_patient", "id_user")


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


def parse_create_request(body: CapturedBody) -> dict[str, Any]:
    """Decode the captured body into an open field mapping.

    Only the top-level shape is checked here; values keep whatever JSON
    type the caller sent.
    """
    try:
        decoded = json.load(body.stream(), parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        logger.warning("Failed to parse request JSON: %s", exc)
        raise InvalidPayloadError() from exc

    if not isinstance(decoded, dict):
        logger.warning("Request JSON is a %s, expected an object", type(decoded).__name__)
        raise InvalidPayloadError()
    return decoded


def ensure_required_fields(request: dict[str, Any]) -> None:
    """Raise for the first required key that is absent. ``null`` values count as present."""
    for field in REQUIRED_FIELDS:
        if field not in request:
            logger.warning("Missing required field: %s", field)
            raise MissingFieldError(field)


def validate_create_request(body: CapturedBody) -> dict[str, Any]:
    request = parse_create_request(body)
    logger.info("Received create request: %s", json.dumps(request, ensure_ascii=False))
    ensure_required_fields(request)
    return request
