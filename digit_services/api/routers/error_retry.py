"""Error retry API: POST /error/v1/_retry, POST /error/v1/_search."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from digit_services.api.dependencies import get_error_retry_service
from digit_services.application.error_retry_service import ErrorRetryService
from digit_services.domain.schemas.common import ResponseInfo
from digit_services.domain.schemas.error_retry import (
    ErrorDetailSearchRequest,
    ErrorDetailSearchResponse,
    ErrorRetryRequest,
    ErrorRetryResponse,
)

router = APIRouter()


@router.post("/_retry", response_model=ErrorRetryResponse, status_code=status.HTTP_202_ACCEPTED)
async def retry_error(
    body: ErrorRetryRequest,
    error_retry_service: Annotated[ErrorRetryService, Depends(get_error_retry_service)],
):
    """Replay the failed call behind an error record. 202 once processed, 500 if not eligible."""
    outcome = await error_retry_service.attempt_retry(body)
    return Response(
        content=outcome.response.model_dump_json(by_alias=True),
        media_type="application/json",
        status_code=(
            status.HTTP_202_ACCEPTED if outcome.accepted else status.HTTP_500_INTERNAL_SERVER_ERROR
        ),
    )


@router.post("/_search", response_model=ErrorDetailSearchResponse, response_model_by_alias=True)
async def search_errors(
    body: ErrorDetailSearchRequest,
    error_retry_service: Annotated[ErrorRetryService, Depends(get_error_retry_service)],
):
    records = await error_retry_service.search(body)
    return ErrorDetailSearchResponse(
        response_info=ResponseInfo.from_request_info(body.request_info),
        error_details=records,
    )
