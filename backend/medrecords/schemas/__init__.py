"""Pydantic schemas for the MedRecords API."""

from medrecords.schemas.query import CreateRecordResponse, QueryPayload

__all__ = [
    "CreateRecordResponse",
    "QueryPayload",
]
