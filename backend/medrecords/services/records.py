"""Record creation pipeline.

Received -> BodyCaptured -> Validated -> QueryBuilt -> UpstreamCalled ->
ResponseUnwrapped. Every stage raises a ``RecordCreationError`` on failure,
which ends the request; nothing is retried.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from medrecords.schemas.query import CreateRecordResponse
from medrecords.services.body_capture import CapturedBody
from medrecords.services.query_builder import build_create_query, serialize_query
from medrecords.services.query_service import QueryExecutor
from medrecords.services.response_unwrapper import extract_record_id
from medrecords.services.validation import validate_create_request

logger = logging.getLogger(__name__)


@dataclass
class CreateRecordResult:
    record_id: Any = None
    has_id: bool = False

    def to_response(self) -> dict[str, Any]:
        if self.has_id:
            return CreateRecordResponse(id=self.record_id).model_dump()
        return CreateRecordResponse().model_dump(exclude={"id"})


class RecordCreationService:
    """Validates a captured request and forwards it to the query service."""

    def __init__(self, executor: QueryExecutor, *, returning_id: bool = False):
        self.executor = executor
        self.returning_id = returning_id

    async def create(self, body: CapturedBody) -> CreateRecordResult:
        request = validate_create_request(body)
        payload = build_create_query(request, returning_id=self.returning_id)
        upstream_body = await self.executor.execute(serialize_query(payload))

        if not self.returning_id:
            logger.info("Medical record created")
            return CreateRecordResult()

        record_id = extract_record_id(upstream_body)
        logger.info("Medical record created with id=%s", record_id)
        return CreateRecordResult(record_id=record_id, has_id=True)
