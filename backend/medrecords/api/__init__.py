"""API Routes for MedRecords."""

from medrecords.api import health, records

__all__ = [
    "health",
    "records",
]
