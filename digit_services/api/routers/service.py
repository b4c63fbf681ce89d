"""Service API: POST /service/v1/_create, /_search."""

from typing import Annotated

from fastapi import APIRouter, Depends

from digit_services.api.dependencies import get_service_request_service
from digit_services.application.service_request_service import ServiceRequestService
from digit_services.domain.schemas.common import ResponseInfo
from digit_services.domain.schemas.service import (
    ServiceRequest,
    ServiceResponse,
    ServiceSearchRequest,
)

router = APIRouter()


@router.post("/_create", response_model=ServiceResponse, response_model_by_alias=True)
async def create_service(
    body: ServiceRequest,
    service_request_service: Annotated[ServiceRequestService, Depends(get_service_request_service)],
):
    service = await service_request_service.create(body)
    return ServiceResponse(
        response_info=ResponseInfo.from_request_info(body.request_info),
        service=[service],
    )


@router.post("/_search", response_model=ServiceResponse, response_model_by_alias=True)
async def search_services(
    body: ServiceSearchRequest,
    service_request_service: Annotated[ServiceRequestService, Depends(get_service_request_service)],
):
    services = await service_request_service.search(body)
    return ServiceResponse(
        response_info=ResponseInfo.from_request_info(body.request_info),
        service=services,
        pagination=body.pagination,
    )
