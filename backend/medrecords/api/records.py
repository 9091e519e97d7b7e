import logging

from fastapi import APIRouter, Depends, Request

from medrecords.config import settings
from medrecords.logging import log_raw_body
from medrecords.schemas.query import CreateRecordResponse
from medrecords.services.body_capture import capture_request_body
from medrecords.services.query_service import QueryExecutor, get_query_executor
from medrecords.services.records import RecordCreationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Medical Records"])


def get_record_service(
    executor: QueryExecutor = Depends(get_query_executor),
) -> RecordCreationService:
    return RecordCreationService(executor, returning_id=settings.return_record_id)


@router.post("/create", responses={200: {"model": CreateRecordResponse}})
async def create_record(
    request: Request,
    service: RecordCreationService = Depends(get_record_service),
):
    """Create a medical record through the query service.

    The body is an open JSON object; only ``description``, ``id_patient`` and
    ``id_user`` are required and forwarded.
    """
    body = await capture_request_body(request)
    log_raw_body(logger, "Raw create request", body.raw)
    result = await service.create(body)
    return result.to_response()
