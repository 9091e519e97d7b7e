"""Business logic services for MedRecords."""

from medrecords.services.body_capture import CapturedBody, capture_request_body
from medrecords.services.query_service import (
    HTTPQueryExecutor,
    InMemoryQueryExecutor,
    QueryExecutor,
)
from medrecords.services.records import CreateRecordResult, RecordCreationService

__all__ = [
    "CapturedBody",
    "capture_request_body",
    "HTTPQueryExecutor",
    "InMemoryQueryExecutor",
    "QueryExecutor",
    "CreateRecordResult",
    "RecordCreationService",
]
