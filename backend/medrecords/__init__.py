"""MedRecords: medical record creation gateway in front of the query service."""
