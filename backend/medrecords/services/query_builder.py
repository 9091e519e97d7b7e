"""Map a validated create request onto the parameterized INSERT."""

from __future__ import annotations

import json
import logging
from typing import Any

from medrecords.errors import SerializationError
from medrecords.schemas.query import QueryPayload
from medrecords.services.validation import REQUIRED_FIELDS

logger = logging.getLogger(__name__)

INSERT_MEDICAL_RECORD_SQL = (
    "INSERT INTO medical_records (description, id_patient, id_user) VALUES ($1, $2, $3)"
)
RETURNING_ID_CLAUSE = " RETURNING id"


def build_create_query(request: dict[str, Any], *, returning_id: bool = False) -> QueryPayload:
    """Bind description, id_patient and id_user, in that order, as $1..$3.

    Any other keys in ``request`` are dropped.
    """
    sql = INSERT_MEDICAL_RECORD_SQL
    if returning_id:
        sql += RETURNING_ID_CLAUSE
    return QueryPayload(sql=sql, args=[request[field] for field in REQUIRED_FIELDS])


def serialize_query(payload: QueryPayload) -> bytes:
    """Encode the payload as the outbound JSON body."""
    try:
        body = json.dumps(
            {"sql": payload.sql, "args": list(payload.args)},
            ensure_ascii=False,
            allow_nan=False,
        ).encode("utf-8")
    except (TypeError, ValueError) as exc:
        logger.error("Failed to serialize query payload: %s", exc)
        raise SerializationError() from exc
    return body
