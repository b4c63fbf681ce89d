"""Service definition API: POST /service/definition/v1/_create, /_search."""

from typing import Annotated

from fastapi import APIRouter, Depends

from digit_services.api.dependencies import get_service_definition_service
from digit_services.application.service_definition_service import ServiceDefinitionService
from digit_services.domain.schemas.common import ResponseInfo
from digit_services.domain.schemas.service_definition import (
    ServiceDefinitionRequest,
    ServiceDefinitionResponse,
    ServiceDefinitionSearchRequest,
)

router = APIRouter()


@router.post("/_create", response_model=ServiceDefinitionResponse, response_model_by_alias=True)
async def create_service_definition(
    body: ServiceDefinitionRequest,
    service: Annotated[ServiceDefinitionService, Depends(get_service_definition_service)],
):
    """Validate, enrich and submit a service definition for persistence."""
    definition = await service.create(body)
    return ServiceDefinitionResponse(
        response_info=ResponseInfo.from_request_info(body.request_info),
        service_definition=[definition],
    )


@router.post("/_search", response_model=ServiceDefinitionResponse, response_model_by_alias=True)
async def search_service_definitions(
    body: ServiceDefinitionSearchRequest,
    service: Annotated[ServiceDefinitionService, Depends(get_service_definition_service)],
):
    definitions = await service.search(body)
    return ServiceDefinitionResponse(
        response_info=ResponseInfo.from_request_info(body.request_info),
        service_definition=definitions,
        pagination=body.pagination,
    )
